"""
Flask REST API for PocketCalc Web Portal
Exposes one calculator session and its history as JSON endpoints
"""
import threading
from flask import Flask, jsonify, request
from flask_cors import CORS
from calculator import Calculator
from display import format_number
from database import Database
from history_manager import HistoryManager
from keymap import ACTIONS, UnknownInputError, dispatch_key, perform
import config


def _display_payload(calculator):
    return {
        'display': calculator.display_text,
        'state': calculator.engine_state.value,
        'memory': format_number(calculator.state.memory),
        'has_memory': calculator.has_memory,
    }


def create_app(db_path=None):
    """Build the API around a fresh calculator session"""
    app = Flask(__name__)
    CORS(app)  # Enable CORS for all routes

    # Initialize components
    db = Database(db_path)
    calculator = Calculator()
    history_manager = HistoryManager(db)
    history_manager.attach(calculator)
    # Requests run on worker threads; one engine operation at a time
    lock = threading.Lock()

    app.config['CALCULATOR'] = calculator
    app.config['CALCULATOR_LOCK'] = lock
    app.config['HISTORY_MANAGER'] = history_manager

    @app.route('/api')
    def api_info():
        """API information page"""
        return jsonify({
            'success': True,
            'data': {
                'name': config.APP_NAME,
                'version': config.VERSION,
                'endpoints': {
                    'GET /api/display': 'Current display text and engine state',
                    'POST /api/input': 'Perform an action: {"action": ..., "value": ...}',
                    'POST /api/key': 'Press a raw key: {"key": ...}',
                    'GET /api/calculations': 'Calculation history',
                    'DELETE /api/calculations': 'Clear calculation history',
                },
                'actions': list(ACTIONS),
            }
        })

    @app.route('/api/display')
    def get_display():
        """Get the current display"""
        with lock:
            payload = _display_payload(calculator)
        return jsonify({'success': True, 'data': payload})

    @app.route('/api/input', methods=['POST'])
    def post_input():
        """Perform one calculator action"""
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not data:
            return jsonify({'success': False, 'error': 'No data provided'}), 400

        try:
            with lock:
                perform(calculator, data.get('action'), data.get('value'))
                payload = _display_payload(calculator)
        except UnknownInputError as e:
            return jsonify({'success': False, 'error': str(e)}), 400
        except Exception as e:
            return jsonify({'success': False, 'error': str(e)}), 500

        return jsonify({'success': True, 'data': payload})

    @app.route('/api/key', methods=['POST'])
    def post_key():
        """Press a raw key or button label"""
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not data.get('key'):
            return jsonify({'success': False, 'error': 'No key provided'}), 400

        try:
            with lock:
                display_text = dispatch_key(calculator, str(data['key']))
                payload = _display_payload(calculator)
        except Exception as e:
            return jsonify({'success': False, 'error': str(e)}), 500

        if display_text is None:
            return jsonify({'success': False, 'error': f"Not a calculator key: {data['key']!r}"}), 400
        return jsonify({'success': True, 'data': payload})

    @app.route('/api/calculations')
    def get_calculations():
        """Get calculation history"""
        try:
            limit = int(request.args.get('limit', 50))
            if limit < 0:
                raise ValueError(f"limit must not be negative: {limit}")
            calculations = history_manager.get_calculation_history(limit)

            formatted = []
            for c in calculations:
                formatted.append({
                    'expression': c[0],
                    'result': c[1],
                    'timestamp': c[2]
                })

            return jsonify({
                'success': True,
                'data': formatted,
                'count': len(formatted)
            })
        except ValueError as e:
            return jsonify({'success': False, 'error': str(e)}), 400
        except Exception as e:
            return jsonify({'success': False, 'error': str(e)}), 500

    @app.route('/api/calculations', methods=['DELETE'])
    def clear_calculations():
        """Clear calculation history"""
        try:
            history_manager.clear_calculation_history()
            return jsonify({'success': True})
        except Exception as e:
            return jsonify({'success': False, 'error': str(e)}), 500

    return app


if __name__ == '__main__':
    print("\n" + "="*60)
    print("PocketCalc Web Portal API Server")
    print("="*60)
    print(f"Server starting on http://{config.WEB_HOST}:{config.WEB_PORT}")
    print(f"Access from this device: http://localhost:{config.WEB_PORT}")
    if config.WEB_HOST == '0.0.0.0':
        print(f"Access from network: http://<your-ip>:{config.WEB_PORT}")
    print("="*60 + "\n")

    create_app().run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False)
