from __future__ import annotations

from brandix.app.extensions import db


class Tile(db.Model):
    __tablename__ = "tiles"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(255), nullable=False)
    category = db.Column(db.String(100), nullable=False, index=True)  # Wall | Marble | Parking
    size = db.Column(db.String(50), nullable=False)  # display only, e.g. 300x450mm
    finish = db.Column(db.String(50), nullable=False)
    image_url = db.Column(db.String(1024), nullable=False)
    description = db.Column(db.Text, nullable=True)
