from flask import request, jsonify
from flask_jwt_extended import jwt_required
from emusite.models.base import as_naive_utc
from emusite.models.news import News
from emusite.application.content import create_entry, update_entry, delete_entry
from emusite.normalizers.news import normalize_news
from emusite.normalizers.pagination import normalize_pagination
from emusite.schemas import validate, changes
from emusite.schemas.news import NewsCreate, NewsUpdate
from emusite.utils.filters import search_filter
from emusite.utils.optimistic_lock import enforce_optimistic_lock
from emusite.utils.pagination import get_page_args, paginate_offset
from emusite.utils.responses import success
from . import api_bp


def _to_naive_utc(data):
    if "publish_date" in data:
        data["publish_date"] = as_naive_utc(data["publish_date"])
    return data


@api_bp.route("/news", methods=["GET"])
def list_news():
    page, per_page = get_page_args()
    query = News.query

    search = request.args.get("search")
    if search:
        query = query.filter(search_filter(News, search, "title", "slug", "content"))

    category = request.args.get("category")
    if category and category != "all":
        query = query.filter(News.category == category)

    status = request.args.get("status")
    if status and status != "all":
        query = query.filter(News.status == status)

    items, meta = paginate_offset(
        query.order_by(News.publish_date.desc()),
        page=page,
        per_page=per_page,
    )
    return jsonify(normalize_pagination(items, normalize_news, meta)), 200


@api_bp.route("/news", methods=["POST"])
@jwt_required()
def create_news():
    data = validate(NewsCreate, request.get_json(silent=True))
    news = create_entry(News, _to_naive_utc(data.model_dump()))
    return success(normalize_news(news), 201)


@api_bp.route("/news/<news_id>", methods=["GET"])
def get_news(news_id):
    news = News.query.filter_by(id=news_id).first_or_404(description="News not found")
    return success(normalize_news(news))


@api_bp.route("/news/<news_id>", methods=["PUT"])
@jwt_required()
def update_news(news_id):
    news = News.query.filter_by(id=news_id).first_or_404(description="News not found")
    enforce_optimistic_lock(news)

    data = validate(NewsUpdate, request.get_json(silent=True))
    update_entry(news, _to_naive_utc(changes(data, nullable=("cover_image", "excerpt"))))
    return success(normalize_news(news))


@api_bp.route("/news/<news_id>", methods=["DELETE"])
@jwt_required()
def delete_news(news_id):
    news = News.query.filter_by(id=news_id).first_or_404(description="News not found")
    delete_entry(news)
    return jsonify({"success": True, "message": "News deleted"}), 200
