"""LifeTracker GUI Application using NiceGUI."""

from datetime import date

from nicegui import ui

from lifetracker.charts import build_category_pie, build_monthly_bar
from lifetracker.config import settings
from lifetracker.database import init_db
from lifetracker.exceptions import InvalidInputError
from lifetracker.models import (
    Transaction,
    TransactionDraft,
    default_category,
    get_categories,
    resolve_category,
)
from lifetracker.services import BudgetDashboardService, GoalService, HabitService
from lifetracker.services.export_service import MEDIA_TYPE

NAV_LINKS = [('/', 'Budget', 'account_balance_wallet'), ('/habits', 'Habits', 'check_circle'), ('/goals', 'Goals', 'flag')]
FILTER_LABELS = {'all': 'All', 'income': 'Income', 'expense': 'Expense'}


def format_currency(amount: float) -> str:
    sign = '-' if amount < 0 else ''
    return f'{sign}${abs(amount):,.2f}'


class App:
    """Main application frontend using NiceGUI."""

    def __init__(self):
        """Initialize services and register pages."""
        init_db()

        self.budget = BudgetDashboardService()
        self.habit_service = HabitService()
        self.goal_service = GoalService()

        ui.page('/')(self._budget_page)
        ui.page('/habits')(self._habits_page)
        ui.page('/goals')(self._goals_page)

    def _setup_page(self, title: str, subtitle: str):
        """Setup colors, the navigation header and the page heading."""
        ui.colors(primary='#38bdf8', secondary='#0ea5e9', accent='#0369a1')
        ui.query('body').style('background-color: #0f172a; color: #f8fafc;')

        with ui.header().classes('items-center justify-between bg-slate-900 border-b border-slate-700'):
            ui.label(settings.window_title).classes('text-2xl font-bold text-sky-400')
            with ui.row().classes('items-center gap-4'):
                for path, label, icon in NAV_LINKS:
                    ui.button(label, icon=icon, on_click=lambda p=path: ui.navigate.to(p)).props('flat color=white')

        with ui.column().classes('w-full gap-1 px-4 pt-4'):
            ui.label(title).classes('text-3xl font-bold')
            ui.label(subtitle).classes('text-slate-400')

    def _stat_card(self, title: str, value: str, color: str):
        with ui.card().classes('grow p-6 bg-slate-800 border border-slate-700 items-center justify-center') as card:
            ui.label(title).classes('text-slate-400 uppercase text-xs tracking-wider')
            ui.label(value).classes(f'text-3xl font-bold text-{color}')
        return card

    # Budget

    def _budget_page(self):
        self._setup_page('Budget Tracker', 'Track your income and expenses')

        @ui.refreshable
        def dashboard():
            totals = self.budget.totals
            balance_color = 'green-400' if self.budget.analytics_service.is_balance_positive(totals) else 'red-400'
            with ui.row().classes('w-full gap-4'):
                self._stat_card('Income', format_currency(totals['income']), 'green-400')
                self._stat_card('Expenses', format_currency(totals['expenses']), 'red-400')
                self._stat_card('Balance', format_currency(totals['balance']), balance_color)

            category_data = self.budget.category_data
            monthly_data = self.budget.monthly_data
            with ui.row().classes('w-full gap-4'):
                with ui.card().classes('grow p-4 bg-slate-800 border-slate-700'):
                    ui.label('Expense Breakdown').classes('text-lg font-bold mb-4')
                    if category_data:
                        ui.plotly(build_category_pie(category_data)).classes('w-full h-64')
                    else:
                        ui.label('No expense data yet').classes('text-slate-400')
                with ui.card().classes('grow p-4 bg-slate-800 border-slate-700'):
                    ui.label('Monthly Overview').classes('text-lg font-bold mb-4')
                    if self.budget.analytics_service.has_monthly_activity(monthly_data):
                        ui.plotly(build_monthly_bar(monthly_data)).classes('w-full h-64')
                    else:
                        ui.label('No monthly data yet').classes('text-slate-400')

            with ui.card().classes('w-full p-4 bg-slate-800 border-slate-700'):
                with ui.row().classes('w-full items-center justify-between'):
                    ui.label('Transactions').classes('text-lg font-bold')
                    ui.toggle(FILTER_LABELS, value=self.budget.filter, on_change=lambda e: change_filter(e.value))
                visible = self.budget.visible_transactions
                if not visible:
                    ui.label('No transactions yet').classes('text-slate-400')
                for txn in visible:
                    self._transaction_row(txn, on_delete=delete)

        def change_filter(mode: str):
            self.budget.set_filter(mode)
            dashboard.refresh()

        def delete(txn_id: str):
            self.budget.delete_transaction(txn_id)
            ui.notify('Transaction deleted')
            dashboard.refresh()

        def export():
            filename, content = self.budget.export_csv()
            ui.download.content(content, filename, MEDIA_TYPE)

        def confirm_clear():
            count = len(self.budget.transactions)
            with ui.dialog() as dialog, ui.card():
                ui.label(f'Are you sure you want to delete all {count} transactions?').classes('text-lg')
                with ui.row().classes('w-full justify-end'):
                    ui.button('Cancel', on_click=dialog.close).props('flat')
                    ui.button('Delete', color='red', on_click=lambda: perform_clear(dialog))
            dialog.open()

        def perform_clear(dialog):
            self.budget.clear_transactions()
            dialog.close()
            ui.notify('Deleted all transactions')
            dashboard.refresh()

        with ui.row().classes('w-full justify-end gap-2 px-4'):
            ui.button('Clear All', icon='delete_sweep', on_click=confirm_clear).props('flat color=red')
            ui.button('Export', icon='download', on_click=export).props('outline')
            ui.button('Add Transaction', icon='add', on_click=lambda: self._open_transaction_dialog(dashboard.refresh))

        with ui.column().classes('w-full grow p-4 gap-6'):
            dashboard()

    def _transaction_row(self, txn: Transaction, on_delete):
        category = resolve_category(txn.category, txn.type.value)
        is_income = txn.type.value == 'income'
        with ui.row().classes('w-full items-center justify-between border-b border-slate-700 py-2'):
            with ui.row().classes('items-center gap-3'):
                ui.element('div').classes('w-3 h-3 rounded-full').style(f'background-color: {category.color}')
                with ui.column().classes('gap-0'):
                    ui.label(txn.description).classes('font-medium')
                    ui.label(f"{category.name} • {txn.date.strftime('%b %d, %Y')}").classes('text-xs text-slate-400')
            with ui.row().classes('items-center gap-2'):
                sign = '+' if is_income else '-'
                ui.label(f'{sign}{format_currency(txn.amount)}').classes(
                    'font-bold ' + ('text-green-400' if is_income else 'text-red-400')
                )
                ui.button(icon='delete', on_click=lambda: on_delete(txn.id)).props('flat round color=red')

    def _open_transaction_dialog(self, on_saved):
        """Open the add-transaction dialog."""

        def category_options(txn_type: str) -> dict[str, str]:
            return {c.id: c.name for c in get_categories(txn_type)}

        def switch_type(txn_type: str):
            category.set_options(category_options(txn_type), value=default_category(txn_type).id)

        def submit():
            draft = TransactionDraft(
                type=txn_type.value,
                amount=amount.value,
                description=description.value or '',
                category=category.value or '',
                date=txn_date.value,
            )
            try:
                self.budget.add_transaction(draft)
            except InvalidInputError as e:
                ui.notify(str(e), type='negative')
                return
            dialog.close()
            ui.notify('Transaction added', type='positive')
            on_saved()

        with ui.dialog() as dialog, ui.card().classes('w-96'):
            ui.label('Add Transaction').classes('text-xl font-bold mb-4')
            txn_type = ui.toggle({'income': 'Income', 'expense': 'Expense'}, value='expense', on_change=lambda e: switch_type(e.value))
            description = ui.input('Description', placeholder='What was this for?').classes('w-full')
            amount = ui.number('Amount', min=0, step=0.01, format='%.2f').classes('w-full')
            category = ui.select(category_options('expense'), label='Category', value=default_category('expense').id).classes('w-full')
            txn_date = ui.input('Date', value=date.today().isoformat()).props('type=date').classes('w-full')

            with ui.row().classes('w-full justify-end mt-4'):
                ui.button('Cancel', on_click=dialog.close).props('flat')
                ui.button('Add Transaction', on_click=submit)
        dialog.open()

    # Habits

    def _habits_page(self):
        self._setup_page('Habit Tracker', 'Build better habits, one day at a time')

        @ui.refreshable
        def habits():
            stats = self.habit_service.stats()
            with ui.row().classes('w-full gap-4'):
                self._stat_card('Total Habits', str(stats['total']), 'sky-400')
                self._stat_card('Completed Today', str(stats['completed']), 'green-400')
                self._stat_card('Pending', str(stats['pending']), 'amber-400')

            if not self.habit_service.list():
                ui.label('No habits yet. Start building better habits by adding your first one!').classes('text-slate-400')
            with ui.row().classes('w-full gap-4'):
                for habit in self.habit_service.list():
                    border = 'border-green-500' if habit.completed else 'border-slate-700'
                    with ui.card().classes(f'w-72 p-4 bg-slate-800 border {border}'):
                        with ui.row().classes('w-full items-start justify-between'):
                            with ui.column().classes('gap-0'):
                                ui.label(habit.name).classes('text-lg font-bold')
                                if habit.description:
                                    ui.label(habit.description).classes('text-sm text-slate-400')
                            ui.button(icon='check', on_click=lambda h=habit: act(self.habit_service.toggle, h.id)).props(
                                'round ' + ('color=green' if habit.completed else 'outline')
                            )
                        with ui.row().classes('w-full items-center justify-between'):
                            ui.label(f'{habit.streak} day streak').classes('text-xs text-slate-400')
                            ui.button(icon='delete', on_click=lambda h=habit: act(self.habit_service.remove, h.id)).props('flat round color=red')

        def act(operation, *args):
            operation(*args)
            habits.refresh()

        def open_dialog():
            def submit():
                try:
                    self.habit_service.add(name.value, description.value)
                except InvalidInputError as e:
                    ui.notify(str(e), type='negative')
                    return
                dialog.close()
                habits.refresh()

            with ui.dialog() as dialog, ui.card().classes('w-96'):
                ui.label('Add New Habit').classes('text-xl font-bold mb-4')
                name = ui.input('Habit Name', placeholder='e.g., Exercise for 30 minutes').classes('w-full')
                description = ui.textarea('Description (optional)').classes('w-full')
                with ui.row().classes('w-full justify-end mt-4'):
                    ui.button('Cancel', on_click=dialog.close).props('flat')
                    ui.button('Add Habit', on_click=submit)
            dialog.open()

        with ui.row().classes('w-full justify-end gap-2 px-4'):
            ui.button('Reset', icon='refresh', on_click=lambda: act(self.habit_service.reset_all)).props('outline')
            ui.button('Add Habit', icon='add', on_click=open_dialog)

        with ui.column().classes('w-full grow p-4 gap-6'):
            habits()

    # Goals

    def _goals_page(self):
        self._setup_page('Goal Tracker', 'Set goals and track your progress')
        step = settings.goal_progress_step

        @ui.refreshable
        def goals():
            stats = self.goal_service.stats()
            with ui.row().classes('w-full gap-4'):
                self._stat_card('Total Goals', str(stats['total']), 'sky-400')
                self._stat_card('Completed', str(stats['completed']), 'green-400')
                self._stat_card('In Progress', str(stats['in_progress']), 'amber-400')

            if not self.goal_service.list():
                ui.label('No goals yet. Set your first goal and start tracking your progress!').classes('text-slate-400')
            with ui.row().classes('w-full gap-4'):
                for goal in self.goal_service.list():
                    border = 'border-green-500' if goal.completed else 'border-slate-700'
                    with ui.card().classes(f'w-72 p-4 bg-slate-800 border {border}'):
                        with ui.row().classes('w-full items-start justify-between'):
                            with ui.column().classes('gap-0'):
                                ui.label(goal.name).classes('text-lg font-bold')
                                if goal.description:
                                    ui.label(goal.description).classes('text-sm text-slate-400')
                            ui.button(icon='emoji_events', on_click=lambda g=goal: act(self.goal_service.toggle, g.id)).props(
                                'round ' + ('color=green' if goal.completed else 'outline')
                            )
                        ui.label(f'Progress {goal.current} / {goal.target}').classes('text-sm')
                        ui.linear_progress(value=goal.progress / 100, show_value=False)
                        ui.label(f'{round(goal.progress)}%').classes('text-xs text-slate-400')
                        if not goal.completed:
                            with ui.row().classes('items-center gap-2'):
                                ui.button(f'-{step}', on_click=lambda g=goal: act(self.goal_service.update_progress, g.id, -step)).props('outline dense')
                                ui.button(f'+{step}', on_click=lambda g=goal: act(self.goal_service.update_progress, g.id, step)).props('dense')
                        with ui.row().classes('w-full items-center justify-between'):
                            ui.label(f"Target: {goal.target_date or 'No deadline'}").classes('text-xs text-slate-400')
                            ui.button(icon='delete', on_click=lambda g=goal: act(self.goal_service.remove, g.id)).props('flat round color=red')

        def act(operation, *args):
            operation(*args)
            goals.refresh()

        def open_dialog():
            def submit():
                try:
                    self.goal_service.add(name.value, description.value, target.value, target_date.value)
                except InvalidInputError as e:
                    ui.notify(str(e), type='negative')
                    return
                dialog.close()
                goals.refresh()

            with ui.dialog() as dialog, ui.card().classes('w-96'):
                ui.label('Add New Goal').classes('text-xl font-bold mb-4')
                name = ui.input('Goal Name', placeholder='e.g., Read 50 books this year').classes('w-full')
                description = ui.textarea('Description (optional)').classes('w-full')
                target = ui.number('Target Value', value=100, min=1, step=1, format='%d').classes('w-full')
                target_date = ui.input('Target Date (optional)').props('type=date').classes('w-full')
                with ui.row().classes('w-full justify-end mt-4'):
                    ui.button('Cancel', on_click=dialog.close).props('flat')
                    ui.button('Add Goal', on_click=submit)
            dialog.open()

        with ui.row().classes('w-full justify-end gap-2 px-4'):
            ui.button('Add Goal', icon='add', on_click=open_dialog)

        with ui.column().classes('w-full grow p-4 gap-6'):
            goals()
