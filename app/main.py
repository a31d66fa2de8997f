"""
Text-menu frontend for Budget Tracker.

This is the interface a single user interacts with:

    python -m app.main

DESIGN PRINCIPLES:
1. Simple numbered menu
2. Re-prompt on bad input instead of failing
3. Clear error messages in simple language
4. Nothing survives the session (no persistence)
"""

from budget_tracker.shell import main


if __name__ == "__main__":
    main()
