"""
Next Word Predictor Web Front End

A Flask application with one text field and a "Go!" button. Each click
runs one prediction and renders the predicted words as a simple list.
"""

import os
from typing import Dict, Optional

from flask import Flask, current_app, jsonify, render_template, request

from wordpredictor import (
    EngineConfig, PredictionEngine, EngineResult, Invalid, NoPrediction, Ranked
)


def load_config() -> EngineConfig:
    """Read the engine configuration from the environment."""
    path = os.environ.get('WORDPREDICTOR_CONFIG')
    config = EngineConfig.from_json(path) if path else EngineConfig()
    return config.with_overrides(data_dir=os.environ.get('WORDPREDICTOR_DATA_DIR'))


def prediction_view(result: EngineResult) -> Dict:
    """
    What the page and the JSON API show for a result. Failures show
    nothing, exactly like an empty prediction, but keep their own status.
    """
    if isinstance(result, Ranked):
        return {
            'status': 'ranked',
            'words': result.words,
            'scores': result.scores,
            'order': result.order.value,
        }
    if isinstance(result, Invalid):
        return {'status': 'invalid', 'message': result.message, 'words': []}
    if isinstance(result, NoPrediction):
        return {'status': 'no_prediction', 'words': []}
    return {'status': 'failure', 'words': []}


def get_engine() -> PredictionEngine:
    return current_app.extensions['wordpredictor']


def create_app(config: Optional[EngineConfig] = None) -> Flask:
    """Build the Flask app around a single shared PredictionEngine."""
    app = Flask(__name__)
    app.extensions['wordpredictor'] = PredictionEngine(config or load_config())

    @app.route('/', methods=['GET', 'POST'])
    def index():
        """Render the form; a POST is one click of the Go! button."""
        text = ''
        view = None
        if request.method == 'POST':
            text = request.form.get('phrase', '')
            view = prediction_view(get_engine().predict(text))
        return render_template('index.html', phrase=text, view=view)

    @app.route('/api/predict')
    def api_predict():
        """Predict the next words for ?text=..."""
        result = get_engine().predict(request.args.get('text', ''))
        view = prediction_view(result)

        if view['status'] == 'invalid':
            return jsonify(view), 400
        if view['status'] == 'failure':
            return jsonify({**view, 'error': result.reason}), 503
        return jsonify(view)

    @app.route('/api/stats')
    def api_stats():
        """Store and frequency table statistics."""
        return jsonify(get_engine().stats())

    return app


app = create_app()


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Next Word Predictor Web Front End')
    parser.add_argument('--host', default='127.0.0.1', help='Host to bind to')
    parser.add_argument('--port', type=int, default=5000, help='Port to bind to')
    parser.add_argument('--debug', action='store_true', help='Enable debug mode')

    args = parser.parse_args()

    print("\nStarting Next Word Predictor")
    print(f"   Open http://{args.host}:{args.port} in your browser\n")

    app.run(host=args.host, port=args.port, debug=args.debug, threaded=True)
