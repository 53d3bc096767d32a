#!/usr/bin/env python3
"""
Convenience script to run the web front end.

Usage:
    python run_server.py
    python run_server.py --port 8080 --data-dir data
    python run_server.py --debug
"""

import argparse
import os


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Run the Next Word Predictor web front end')
    parser.add_argument('--host', default='127.0.0.1', help='Host to bind to')
    parser.add_argument('--port', type=int, default=5000, help='Port to bind to')
    parser.add_argument('--data-dir', default=None, help='Directory with the data files')
    parser.add_argument('--config', default=None, help='JSON engine configuration')
    parser.add_argument('--debug', action='store_true', help='Enable debug mode')

    args = parser.parse_args()

    if args.data_dir:
        os.environ['WORDPREDICTOR_DATA_DIR'] = args.data_dir
    if args.config:
        os.environ['WORDPREDICTOR_CONFIG'] = args.config

    # Imported after the environment is set; the app reads it on creation
    from web.app import app

    print(f"""
╔═══════════════════════════════════════════════════════╗
║     Next Word Predictor                               ║
╠═══════════════════════════════════════════════════════╣
║  Open http://{args.host}:{args.port} in your browser         ║
╚═══════════════════════════════════════════════════════╝
    """)

    # Predictions are serialized by the engine's lock
    app.run(host=args.host, port=args.port, debug=args.debug, threaded=True)
