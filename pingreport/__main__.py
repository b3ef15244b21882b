"""
Main entry point for pingreport.
"""
import sys


def main_entry():
    """
    Runs pingreport and exits with its status code.
    """
    from pingreport.app import main as app_main
    sys.exit(app_main())


if __name__ == "__main__":
    main_entry()
