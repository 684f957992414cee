"""
Ranking Model
"""

from datetime import datetime

from ranking_admin.extensions import db


class Ranking(db.Model):
    """One influencer's tracked profile and follower count"""
    __tablename__ = 'rankings'
    
    id = db.Column(db.Integer, primary_key=True)
    account_name = db.Column(db.String(255), nullable=False)
    profile_url = db.Column(db.String(500))
    followers = db.Column(db.Integer, nullable=False, default=0, index=True)
    image_url = db.Column(db.String(500))
    area = db.Column(db.String(255))
    store_name = db.Column(db.String(255))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    def to_dict(self):
        return {
            'id': self.id,
            'account_name': self.account_name,
            'profile_url': self.profile_url,
            'followers': self.followers,
            'image_url': self.image_url,
            'area': self.area,
            'store_name': self.store_name,
        }
    
    def __repr__(self):
        return f'<Ranking {self.account_name} followers:{self.followers}>'
