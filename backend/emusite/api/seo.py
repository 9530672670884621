from flask_jwt_extended import jwt_required
from emusite.models.seo import KeywordRanking, CompetitorAnalysis
from emusite.normalizers.site import normalize_keyword, normalize_competitor
from emusite.utils.responses import success
from . import api_bp


@api_bp.route("/seo/keywords", methods=["GET"])
@jwt_required()
def list_keyword_rankings():
    rankings = KeywordRanking.query.order_by(KeywordRanking.position.asc()).limit(10).all()
    return success([normalize_keyword(r) for r in rankings])


@api_bp.route("/seo/competitors", methods=["GET"])
@jwt_required()
def list_competitors():
    competitors = CompetitorAnalysis.query.order_by(CompetitorAnalysis.score.desc()).limit(5).all()
    return success([normalize_competitor(c) for c in competitors])
