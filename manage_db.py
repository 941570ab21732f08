#!/usr/bin/env python3
"""
Database management script for the time tracker.
Creates and resets the database tables.
"""

import sys
from pathlib import Path
from typing import Optional

from sqlalchemy.engine import Engine

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from tracker.infrastructure.db.database import Base, describe_database, engine, init_db


def create_tables(bind: Optional[Engine] = None):
    """Create any missing tables."""
    bind = bind or engine
    print(f"Creating tables on {bind.url.render_as_string(hide_password=True)}...")
    init_db(bind)


def show_status(bind: Optional[Engine] = None):
    """Show the database name and its tables."""
    details = describe_database(bind or engine)
    print(f"Database: {details['database']}")
    print(f"Tables: {', '.join(details['tables']) or '(none)'}")
    return details


def reset_database(bind: Optional[Engine] = None, confirm=input):
    """Reset database - WARNING: This will drop all data!"""
    response = confirm("This will drop ALL data. Type 'yes' to continue: ")
    if response.lower() != 'yes':
        print("Database reset cancelled.")
        return False

    bind = bind or engine
    print("Resetting database...")
    Base.metadata.drop_all(bind=bind)
    init_db(bind)
    return True


def main(argv=None):
    """Main CLI function."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("Usage: python manage_db.py [command]")
        print("Commands:")
        print("  init           - Create missing tables")
        print("  status         - Show database and tables")
        print("  reset          - Drop and recreate tables (WARNING: drops all data)")
        return 1

    command_name = argv[0]

    if command_name == "init":
        create_tables()
    elif command_name == "status":
        show_status()
    elif command_name == "reset":
        reset_database()
    else:
        print(f"Unknown command: {command_name}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
