"""
Two-Order Delivery Planner
==========================
Entry point. Run with: python main.py [--help]
"""

from delivery_planner.cli.app import main

if __name__ == "__main__":
    main()
