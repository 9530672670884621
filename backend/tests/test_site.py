import os
from urllib.parse import urlparse, parse_qs
from datetime import datetime
from emusite.extensions import db
from emusite.models.page import Page
from emusite.models.news import News
from emusite.models.content import Solution, Service
from emusite.models.legal import LegalDocument
from emusite.models.navigation import NavigationItem
from emusite.models.contact import ContactForm
from emusite.application.settings import save_setting
from conftest import ADMIN_EMAIL, ADMIN_PASSWORD


def test_home_renders_layout(client):
    save_setting("website", {"site_name": "Emu Systems"})
    db.session.add(NavigationItem(label="Products", url="/products", type="header", order=0))
    db.session.add(NavigationItem(label="Hidden", url="/hidden", type="header", order=1, active=False))
    db.session.commit()

    response = client.get("/")
    html = response.get_data(as_text=True)

    assert response.status_code == 200
    assert "Emu Systems" in html
    assert 'href="/products"' in html
    assert "Hidden" not in html


def test_published_page_by_slug(client):
    db.session.add(Page(title="About us", slug="about", status="Published", content="<p>Hello</p>"))
    db.session.add(Page(title="Draft", slug="draft", status="Draft"))
    db.session.commit()

    response = client.get("/about")
    assert response.status_code == 200
    assert "About us" in response.get_data(as_text=True)

    assert client.get("/draft").status_code == 404


def test_unknown_path_renders_404_page(client):
    response = client.get("/no/such/page")

    assert response.status_code == 404
    assert "could not be found" in response.get_data(as_text=True)


def test_news_only_published(client):
    db.session.add(News(title="Launch", slug="launch", category="Press", status="Published",
                        publish_date=datetime(2025, 1, 10), content="<p>New</p>"))
    db.session.add(News(title="Soon", slug="soon", category="Press", status="Draft",
                        publish_date=datetime(2025, 1, 11), content="<p>Later</p>"))
    db.session.commit()

    html = client.get("/news").get_data(as_text=True)
    assert "Launch" in html
    assert "Soon" not in html
    assert client.get("/news/soon").status_code == 404


def test_legal_page_uses_latest_active_document(client):
    for version, day in (("1.0", 1), ("2.0", 15)):
        db.session.add(LegalDocument(
            title=f"Privacy v{version}", slug=f"privacy-{version}", type="privacy",
            content="<p>We respect privacy.</p>", version=version,
            effective_date=datetime(2025, 1, day), status="Active",
        ))
    db.session.commit()

    html = client.get("/privacy-policy").get_data(as_text=True)
    assert "Privacy v2.0" in html
    assert client.get("/terms-of-service").status_code == 404


def test_search(client):
    db.session.add(Page(title="Battery testing guide", slug="guide", status="Published"))
    db.session.commit()

    html = client.get("/search?q=battery").get_data(as_text=True)
    assert "Battery testing guide" in html


def test_contact_form_post(client, fake_smtp):
    response = client.post("/contact", data={
        "first_name": "Ada", "last_name": "Lovelace", "email": "ada@example.com",
        "phone": "123", "company": "AE", "subject": "Hi", "message": "Hello",
    })

    assert response.status_code == 200
    assert ContactForm.query.count() == 1

    response = client.post("/contact", data={"first_name": "Ada"})
    assert response.status_code == 400
    assert ContactForm.query.count() == 1


def test_sitemap_and_default_robots(client):
    db.session.add(Page(title="About", slug="about", status="Published"))
    db.session.commit()

    response = client.get("/sitemap.xml")
    assert response.mimetype == "application/xml"
    assert "<loc>http://testserver/about</loc>" in response.get_data(as_text=True)

    robots = client.get("/robots.txt").get_data(as_text=True)
    assert robots.startswith("User-agent: *\nAllow: /\n")
    assert "Disallow: /api" in robots


def test_solution_and_service_detail_pages_from_sitemap(client):
    db.session.add(Solution(title="Grid Emulation", slug="grid-emulation", status="Active",
                            content="<p>Grid</p>", features=["Bidirectional"]))
    db.session.add(Service(title="Calibration", slug="calibration", status="Active", content="<p>Cal</p>"))
    db.session.add(Solution(title="Old Rig", slug="old-rig", status="Archived"))
    db.session.commit()

    sitemap = client.get("/sitemap.xml").get_data(as_text=True)
    for path in ("/solutions/grid-emulation", "/services/calibration"):
        assert f"<loc>http://testserver{path}</loc>" in sitemap
        assert client.get(path).status_code == 200

    html = client.get("/solutions/grid-emulation").get_data(as_text=True)
    assert "Grid Emulation" in html
    assert "Bidirectional" in html
    assert 'href="/solutions/grid-emulation"' in client.get("/solutions").get_data(as_text=True)
    assert client.get("/solutions/old-rig").status_code == 404


def test_uploaded_files_are_served(app, client):
    folder = os.path.join(app.config["UPLOAD_FOLDER"], "2025", "01")
    os.makedirs(folder)
    with open(os.path.join(folder, "a.txt"), "w") as fh:
        fh.write("hello")

    response = client.get("/uploads/2025/01/a.txt")
    assert response.get_data(as_text=True) == "hello"
    response.close()


# ------------------------
# Admin panel
# ------------------------

def test_admin_redirects_without_session(client):
    response = client.get("/admin/pages")

    location = urlparse(response.headers["Location"])
    assert response.status_code == 302
    assert location.path == "/admin/login"
    assert parse_qs(location.query)["next"] == ["/admin/pages"]


def test_admin_login_page_is_public(client):
    assert client.get("/admin/login").status_code == 200


def test_admin_login_and_dashboard(client, admin):
    response = client.post("/admin/login", data={
        "email": ADMIN_EMAIL, "password": ADMIN_PASSWORD, "next": "/admin/news",
    })
    assert response.status_code == 302
    assert response.headers["Location"].endswith("/admin/news")

    response = client.get("/admin")
    assert response.status_code == 200
    assert "Dashboard" in response.get_data(as_text=True)

    assert client.get("/admin/pages").status_code == 200
    assert client.get("/admin/unknown").status_code == 404


def test_admin_login_rejects_bad_password(client, admin):
    response = client.post("/admin/login", data={"email": ADMIN_EMAIL, "password": "wrong-pass"})

    assert response.status_code == 401
    assert "Invalid email or password" in response.get_data(as_text=True)


def test_admin_logout_revokes_session(client, admin):
    client.post("/admin/login", data={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})

    response = client.get("/admin/logout")
    assert response.status_code == 302
    assert client.get("/admin").status_code == 302
