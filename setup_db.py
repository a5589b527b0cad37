import os
from cardapio import create_app, db
from cardapio.bootstrap import setup_database as bootstrap_database
from config import DevelopmentConfig, ProductionConfig

def setup_database():
    """Setup database based on environment"""
    env = os.environ.get('FLASK_ENV', 'development')

    if env == 'production':
        app = create_app(ProductionConfig)
        print("Setting up production database...")
    else:
        app = create_app(DevelopmentConfig)
        print("Setting up development database...")

    with app.app_context():
        try:
            total = bootstrap_database()
            print(f"Database tables created successfully! {total} user(s) registered.")
        except Exception as e:
            print(f"Error setting up database: {e}")
            db.session.rollback()
            raise

if __name__ == '__main__':
    setup_database()
