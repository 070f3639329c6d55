"""
History Manager for PocketCalc
Records completed calculations and formats them for display
"""
import config


class HistoryManager:
    def __init__(self, db):
        self.db = db

    def attach(self, calculator):
        """Record every calculation the given calculator completes"""
        calculator.add_result_listener(self.add_calculation)

    def add_calculation(self, expression, result):
        """Add a calculation to history"""
        self.db.add_calculation(expression, result)

    def get_calculation_history(self, limit=50):
        """Get calculation history"""
        return self.db.get_calculations(max(0, min(limit, config.MAX_HISTORY_ITEMS)))

    def clear_calculation_history(self):
        """Clear all calculation history"""
        self.db.clear_history()

    def format_calculation_history(self, limit=50):
        """Format calculation history for display"""
        history = self.get_calculation_history(limit)
        formatted = []

        for expr, result, timestamp in history:
            formatted.append(f"{timestamp}: {expr} = {result}")

        return formatted
