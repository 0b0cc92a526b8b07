import sys
import os

sys.path.append(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)  # relative imports

from app import create_app, db
from app.seed import seed_directory


def initialize_basic_data():
    """Create the directory tables and load the sample hierarchy"""
    # Seeding is done here explicitly so the result can be reported
    app = create_app({"DIRECTORY_SEED": False})
    with app.app_context():
        print(f"Initializing directory in {app.config['SQLALCHEMY_DATABASE_URI']}...")
        try:
            store = app.extensions["directory_store"]
            if seed_directory(store):
                print(f"Directory seeded: {store.stats()}")
            else:
                print("Directory already contains data, nothing to do.")
        except Exception as e:
            db.session.rollback()
            print(f"Error initializing directory: {e}")


if __name__ == "__main__":
    initialize_basic_data()
