from collections import OrderedDict
from flask import Blueprint, request, render_template, redirect, url_for, abort
from flask_jwt_extended import current_user, set_access_cookies, unset_jwt_cookies
from emusite.models.page import Page
from emusite.models.product import Product
from emusite.models.category import ProductCategory
from emusite.models.news import News
from emusite.models.content import Solution, Service
from emusite.models.faq import FAQ
from emusite.models.navigation import NavigationItem
from emusite.models.media import MediaAsset
from emusite.models.download import Download
from emusite.models.legal import LegalDocument
from emusite.models.contact import ContactForm
from emusite.models.user import User
from emusite.application.auth import authenticate, start_session, end_session

admin_bp = Blueprint("admin", __name__)

# resource -> (title, model, columns shown, ordering)
RESOURCES = OrderedDict([
    ("pages", ("Pages", Page, ("title", "slug", "status", "updated_at"), Page.updated_at.desc())),
    ("products", ("Products", Product, ("name", "slug", "status", "updated_at"), Product.name.asc())),
    ("categories", ("Categories", ProductCategory, ("name", "slug", "level", "order", "status"), ProductCategory.order.asc())),
    ("news", ("News", News, ("title", "category", "status", "publish_date"), News.publish_date.desc())),
    ("solutions", ("Solutions", Solution, ("title", "category", "status", "updated_at"), Solution.title.asc())),
    ("services", ("Services", Service, ("title", "category", "status", "updated_at"), Service.title.asc())),
    ("faq", ("FAQ", FAQ, ("question", "category", "status", "order"), FAQ.order.asc())),
    ("navigation", ("Navigation", NavigationItem, ("label", "url", "type", "order", "active"), NavigationItem.order.asc())),
    ("media", ("Media", MediaAsset, ("name", "type", "category", "size", "downloads"), MediaAsset.created_at.desc())),
    ("downloads", ("Downloads", Download, ("title", "category", "version", "featured", "downloads"), Download.created_at.desc())),
    ("legal", ("Legal", LegalDocument, ("title", "type", "version", "status", "effective_date"), LegalDocument.updated_at.desc())),
    ("contact", ("Contact submissions", ContactForm, ("first_name", "last_name", "email", "subject", "status", "created_at"), ContactForm.created_at.desc())),
    ("users", ("Users", User, ("name", "email", "role", "status"), User.created_at.desc())),
])


def _safe_next(target):
    """Only redirect back into the admin panel."""
    if target and target.startswith("/admin") and not target.startswith("//"):
        return target
    return url_for("admin.dashboard")


@admin_bp.route("/login", methods=["GET"])
def login():
    return render_template("admin/login.html", next=request.args.get("next", ""), error=None)


@admin_bp.route("/login", methods=["POST"])
def login_submit():
    email = request.form.get("email", "").strip()
    password = request.form.get("password", "")
    next_url = request.form.get("next", "")

    user = authenticate(email, password) if email and password else None
    if user is None:
        return render_template(
            "admin/login.html",
            next=next_url,
            error="Invalid email or password",
        ), 401

    token, _ = start_session(user)

    response = redirect(_safe_next(next_url))
    set_access_cookies(response, token)
    return response


@admin_bp.route("/logout", methods=["GET", "POST"])
def logout():
    end_session(request.cookies.get("token"))

    response = redirect(url_for("admin.login"))
    unset_jwt_cookies(response)
    return response


@admin_bp.route("", methods=["GET"])
def dashboard():
    counts = [
        (name, title, model.query.count())
        for name, (title, model, _, _) in RESOURCES.items()
    ]
    new_messages = ContactForm.query.filter_by(status="new").count()
    return render_template(
        "admin/dashboard.html",
        counts=counts,
        new_messages=new_messages,
        resources=RESOURCES,
        user=current_user,
    )


@admin_bp.route("/<resource>", methods=["GET"])
def resource_list(resource):
    if resource not in RESOURCES:
        abort(404)

    title, model, columns, ordering = RESOURCES[resource]
    rows = model.query.order_by(ordering).all()
    return render_template(
        "admin/list.html",
        resource=resource,
        title=title,
        columns=columns,
        rows=rows,
        resources=RESOURCES,
        user=current_user,
    )
