from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS

# Bound to the app in create_app(); the catalog store reads through db.session
db = SQLAlchemy()
migrate = Migrate()
cors = CORS()
