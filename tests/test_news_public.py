"""
Home feed and public articles API.
"""

from newsportal.modules.news.database import get_latest_articles_db

ROWS = [
    {"id": "1", "title": "Primera nota", "category": "Turismo", "excerpt": "uno",
     "content": "...", "image_url": "https://img/1.jpg", "user_id": "u1",
     "created_at": "2024-05-01T10:00:00+00:00"},
    {"id": "2", "title": "Segunda nota", "category": "Negocios", "excerpt": "dos",
     "content": "...", "image_url": "https://img/2.jpg", "user_id": "u1",
     "created_at": "2024-05-02T10:00:00+00:00"},
    {"id": "3", "title": "Tercera nota", "category": "Lifestyle", "excerpt": "tres",
     "content": "...", "image_url": "https://img/3.jpg", "user_id": "u2",
     "created_at": "2024-05-03T10:00:00+00:00"},
    {"id": "4", "title": "Cuarta nota", "category": "Gastronomía", "excerpt": "cuatro",
     "content": "...", "image_url": "https://img/4.jpg", "user_id": "u2",
     "created_at": "2024-05-04T10:00:00+00:00"},
]


def test_latest_articles_newest_first(app, supabase):
    supabase.news.rows.extend(ROWS)

    with app.app_context():
        articles = get_latest_articles_db(supabase)

    assert [a.id for a in articles] == ["4", "3", "2"]
    assert articles[0].title == "Cuarta nota"


def test_home_features_newest_article(client, supabase):
    supabase.news.rows.extend(ROWS)

    response = client.get("/")
    body = response.get_data(as_text=True)

    assert response.status_code == 200
    featured = body.index("Cuarta nota")
    assert 'class="card featured"' in body[:featured]
    assert body.index("Tercera nota") > featured
    assert "Segunda nota" in body
    assert "Primera nota" not in body


def test_home_shows_static_chrome(client):
    body = client.get("/").get_data(as_text=True)

    assert "Buscar noticias..." in body
    assert "Espacio Publicitario" in body
    for name in ("Gastronomía", "Lifestyle", "Negocios", "Turismo", "Nosotros"):
        assert name in body
    assert "Restaurantes" in body


def test_home_auth_links(client, signed_in):
    anonymous = client.get("/").get_data(as_text=True)
    assert "Iniciar Sesión" in anonymous
    assert "Panel Admin" not in anonymous

    signed_in()
    member = client.get("/").get_data(as_text=True)
    assert "Panel Admin" in member
    assert "Cerrar Sesión" in member


def test_feed_error_renders_empty_page(client, supabase, caplog):
    supabase.news.fail_select = True

    response = client.get("/")

    assert response.status_code == 200
    assert 'class="card featured"' not in response.get_data(as_text=True)
    assert "Error fetching news" in caplog.text


def test_feed_limit_from_config(app, supabase):
    supabase.news.rows.extend(ROWS)
    app.config["FEED_LIMIT"] = 1

    with app.app_context():
        articles = get_latest_articles_db(supabase)

    assert [a.id for a in articles] == ["4"]


def test_api_articles(client, supabase):
    supabase.news.rows.extend(ROWS)

    response = client.get("/api/articles", headers={"Origin": "https://example.org"})

    assert response.status_code == 200
    assert response.headers["Access-Control-Allow-Origin"] in ("*", "https://example.org")
    data = response.get_json()
    assert [a["id"] for a in data] == ["4", "3", "2"]
    assert data[0]["image_url"] == "https://img/4.jpg"


def test_api_articles_error(client, supabase):
    supabase.news.fail_select = True

    response = client.get("/api/articles")

    assert response.status_code == 502
    assert "error" in response.get_json()
