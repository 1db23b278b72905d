# order_app/__main__.py

"""
Run one interactive checkout session.

Usage: python -m order_app
"""

from order_app.services.checkout import main

if __name__ == "__main__":
    raise SystemExit(main())
