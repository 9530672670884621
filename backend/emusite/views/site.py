from flask import Blueprint, request, render_template, abort, current_app, send_from_directory, Response, has_request_context
from pydantic import ValidationError
from sqlalchemy import or_
from emusite.models.page import Page
from emusite.models.product import Product
from emusite.models.category import ProductCategory
from emusite.models.news import News
from emusite.models.content import Solution, Service
from emusite.models.download import Download
from emusite.models.legal import LegalDocument
from emusite.models.section_content import SectionContent
from emusite.models.social_media import SocialMedia
from emusite.models.contact import ContactSetting, GlobalOffice
from emusite.application.catalog import descendant_category_ids
from emusite.application.contact import submit_contact_form
from emusite.application.navigation import navigation_tree
from emusite.application.settings import website_settings
from emusite.application.seo import render_sitemap, robots_txt
from emusite.schemas import validate, format_validation_errors
from emusite.schemas.contact import ContactFormCreate
from emusite.utils.filters import search_filter

site_bp = Blueprint("site", __name__)

LEGAL_PAGES = {
    "privacy-policy": "privacy",
    "terms-of-service": "terms",
    "cookie-policy": "cookie",
}

SEARCH_LIMIT = 20


@site_bp.app_context_processor
def site_chrome():
    """
    Header/footer menus, site settings and social links for the shared
    layout. Also feeds error pages rendered outside this blueprint; API
    requests and CLI rendering get nothing.
    """
    if not has_request_context() or request.blueprint == "api":
        return {}

    return {
        "header_nav": navigation_tree("header", active_only=True),
        "footer_nav": navigation_tree("footer", active_only=True),
        "site": website_settings(),
        "social_links": (
            SocialMedia.query.filter_by(is_active=True)
            .order_by(SocialMedia.display_order.asc())
            .all()
        ),
    }


@site_bp.route("/", methods=["GET"])
def home():
    sections = (
        SectionContent.query.filter_by(status="Active")
        .order_by(SectionContent.created_at.asc())
        .all()
    )
    latest_news = (
        News.query.filter_by(status="Published")
        .order_by(News.publish_date.desc())
        .limit(3)
        .all()
    )
    products = (
        Product.query.filter_by(status="Active")
        .order_by(Product.created_at.desc())
        .limit(6)
        .all()
    )
    return render_template("site/home.html", sections=sections, latest_news=latest_news, products=products)


# ------------------------
# Catalog
# ------------------------

@site_bp.route("/products", methods=["GET"])
def products():
    categories = (
        ProductCategory.query.filter_by(status="Active", parent_id=None)
        .order_by(ProductCategory.order.asc())
        .all()
    )
    items = Product.query.filter_by(status="Active").order_by(Product.name.asc()).all()
    return render_template("site/products.html", categories=categories, products=items)


@site_bp.route("/products/categories/<slug>", methods=["GET"])
def product_category(slug):
    category = ProductCategory.query.filter_by(slug=slug, status="Active").first_or_404()
    category_ids = descendant_category_ids(category.id)

    items = (
        Product.query.filter(Product.category_id.in_(category_ids), Product.status == "Active")
        .order_by(Product.name.asc())
        .all()
    )
    return render_template("site/category.html", category=category, products=items)


@site_bp.route("/products/<id_or_slug>", methods=["GET"])
def product_detail(id_or_slug):
    product = Product.query.filter(
        or_(Product.id == id_or_slug, Product.slug == id_or_slug),
        Product.status != "Discontinued",
    ).first_or_404()
    return render_template("site/product.html", product=product)


# ------------------------
# News
# ------------------------

@site_bp.route("/news", methods=["GET"])
def news():
    items = News.query.filter_by(status="Published").order_by(News.publish_date.desc()).all()
    return render_template("site/news.html", news=items)


@site_bp.route("/news/<slug>", methods=["GET"])
def news_detail(slug):
    article = News.query.filter_by(slug=slug, status="Published").first_or_404()
    return render_template("site/news_detail.html", article=article)


# ------------------------
# Marketing content
# ------------------------

@site_bp.route("/solutions", methods=["GET"])
def solutions():
    items = Solution.query.filter_by(status="Active").order_by(Solution.title.asc()).all()
    return render_template("site/solutions.html", solutions=items)


@site_bp.route("/services", methods=["GET"])
def services():
    items = Service.query.filter_by(status="Active").order_by(Service.title.asc()).all()
    return render_template("site/services.html", services=items)


@site_bp.route("/solutions/<slug>", methods=["GET"])
def solution_detail(slug):
    entry = Solution.query.filter_by(slug=slug, status="Active").first_or_404()
    return render_template("site/content_detail.html", entry=entry, kind="solution", section_title="Solutions")


@site_bp.route("/services/<slug>", methods=["GET"])
def service_detail(slug):
    entry = Service.query.filter_by(slug=slug, status="Active").first_or_404()
    return render_template("site/content_detail.html", entry=entry, kind="service", section_title="Services")


@site_bp.route("/downloads", methods=["GET"])
def downloads():
    items = (
        Download.query.filter_by(status="Active")
        .order_by(Download.featured.desc(), Download.created_at.desc())
        .all()
    )
    return render_template("site/downloads.html", downloads=items)


# ------------------------
# Contact
# ------------------------

def _contact_context():
    return {
        "contact_settings": {s.type: s.data for s in ContactSetting.query.all()},
        "offices": GlobalOffice.query.filter_by(status=True).order_by(GlobalOffice.name.asc()).all(),
    }


@site_bp.route("/contact", methods=["GET"])
def contact():
    return render_template("site/contact.html", form={}, errors=[], submitted=False, **_contact_context())


@site_bp.route("/contact", methods=["POST"])
def contact_submit():
    form = request.form.to_dict()

    try:
        data = validate(ContactFormCreate, form)
    except ValidationError as exc:
        return render_template(
            "site/contact.html",
            form=form,
            errors=format_validation_errors(exc),
            submitted=False,
            **_contact_context(),
        ), 400

    submit_contact_form(data.model_dump())
    return render_template("site/contact.html", form={}, errors=[], submitted=True, **_contact_context())


# ------------------------
# Legal
# ------------------------

def _legal_page(path):
    document = (
        LegalDocument.query.filter_by(type=LEGAL_PAGES[path], status="Active")
        .order_by(LegalDocument.effective_date.desc())
        .first_or_404()
    )
    return render_template("site/legal.html", document=document)


@site_bp.route("/privacy-policy", methods=["GET"])
def privacy_policy():
    return _legal_page("privacy-policy")


@site_bp.route("/terms-of-service", methods=["GET"])
def terms_of_service():
    return _legal_page("terms-of-service")


@site_bp.route("/cookie-policy", methods=["GET"])
def cookie_policy():
    return _legal_page("cookie-policy")


# ------------------------
# Search
# ------------------------

@site_bp.route("/search", methods=["GET"])
def search():
    term = request.args.get("q", "").strip()
    results = {"products": [], "news": [], "pages": []}

    if term:
        results["products"] = (
            Product.query.filter(
                Product.status == "Active",
                search_filter(Product, term, "name", "description"),
            ).limit(SEARCH_LIMIT).all()
        )
        results["news"] = (
            News.query.filter(
                News.status == "Published",
                search_filter(News, term, "title", "excerpt", "content"),
            ).order_by(News.publish_date.desc()).limit(SEARCH_LIMIT).all()
        )
        results["pages"] = (
            Page.query.filter(
                Page.status == "Published",
                search_filter(Page, term, "title", "content"),
            ).limit(SEARCH_LIMIT).all()
        )

    return render_template("site/search.html", term=term, results=results)


# ------------------------
# Crawlers and files
# ------------------------

@site_bp.route("/sitemap.xml", methods=["GET"])
def sitemap():
    return Response(render_sitemap(), mimetype="application/xml")


@site_bp.route("/robots.txt", methods=["GET"])
def robots():
    return Response(robots_txt(), mimetype="text/plain")


@site_bp.route("/uploads/<path:filename>", methods=["GET"])
def uploaded_file(filename):
    return send_from_directory(current_app.config["UPLOAD_FOLDER"], filename)


@site_bp.route("/<slug>", methods=["GET"])
def page(slug):
    cms_page = Page.query.filter_by(slug=slug, status="Published").first()
    if cms_page is None:
        abort(404)
    return render_template("site/page.html", page=cms_page)
