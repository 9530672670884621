from emusite.extensions import db
from .base import BaseModel


class KeywordRanking(BaseModel):
    __tablename__ = 'keyword_rankings'

    keyword = db.Column(db.String(255), nullable=False)
    position = db.Column(db.Integer, nullable=False)
    change = db.Column(db.Integer, nullable=False, default=0)


class CompetitorAnalysis(BaseModel):
    __tablename__ = 'competitor_analyses'

    competitor = db.Column(db.String(255), nullable=False)
    score = db.Column(db.Float, nullable=False, default=0)
    strength = db.Column(db.String(255))
