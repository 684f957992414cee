"""
User Model
"""

from datetime import datetime

from flask_login import UserMixin

from ranking_admin.extensions import db


class User(UserMixin, db.Model):
    """Admin account that may sign in to the management console"""
    __tablename__ = 'users'
    
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(100), nullable=False)
    role = db.Column(db.String(32), nullable=False, default='admin')
    # Deactivated users are rejected on their next request
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    
    def __repr__(self):
        return f'<User {self.email}>'
