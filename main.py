"""
Entry point of the web interface
"""
import os
import sys

# Project root on the Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


def main():
    from app import create_app
    from config import FLASK_HOST, FLASK_PORT

    app = create_app()

    print(f"Nutzenrechner läuft auf {FLASK_HOST}:{FLASK_PORT}")
    app.run(host=FLASK_HOST, port=FLASK_PORT, debug=False)


if __name__ == '__main__':
    main()
