from datetime import datetime

from leaderboard.api.routers.pages import format_date
from leaderboard.services import adjust_points, register_user


def test_leaderboard_page_empty(client):
    res = client.get("/")
    assert res.status_code == 200
    assert "No hay usuarios registrados" in res.text


def test_leaderboard_page_lists_ranked_users(client, store):
    ann = register_user(store, "Ann").codigo_usuario
    register_user(store, "Ben")
    adjust_points(store, ann, "suma")

    res = client.get("/", params={"periodo": "semana"})
    assert res.status_code == 200
    assert res.text.index("Ann") < res.text.index("Ben")
    assert "🥇" in res.text


def test_admin_page_registers_user(client, store):
    res = client.post("/admin", data={"nombre": "Alice"})
    assert res.status_code == 200
    assert "Usuario Alice registrado exitosamente" in res.text

    code = store.load().usuarios[0].codigo_usuario
    assert f"/user/{code}" in res.text


def test_admin_page_shows_registration_error(client, store):
    register_user(store, "Bob")
    res = client.post("/admin", data={"nombre": "BOB"})
    assert res.status_code == 400
    assert "Ya existe un usuario con ese nombre" in res.text


def test_admin_page_summary(client, store):
    code = register_user(store, "Ann").codigo_usuario
    adjust_points(store, code, "suma")
    res = client.get("/admin")
    assert res.status_code == 200
    assert "Usuarios: <strong>1</strong>" in res.text
    assert "Órdenes: <strong>1</strong>" in res.text


def test_admin_page_escapes_names(client, store):
    register_user(store, "<script>x</script>")
    res = client.get("/admin")
    assert "<script>x</script>" not in res.text
    assert "&lt;script&gt;" in res.text


def test_user_page_buttons_adjust_points(client, store):
    code = register_user(store, "Alice").codigo_usuario

    res = client.post(f"/user/{code}/suma", follow_redirects=False)
    assert res.status_code == 303
    assert res.headers["location"].startswith(f"/user/{code}?")

    res = client.post(f"/user/{code}/suma")
    assert res.status_code == 200
    assert "Punto sumado correctamente" in res.text
    assert store.load().usuarios[0].puntos == 2


def test_user_page_not_found(client):
    res = client.get("/user/missing")
    assert res.status_code == 404
    assert "Usuario no encontrado" in res.text


def test_user_page_rejects_unknown_operation(client, store):
    code = register_user(store, "Alice").codigo_usuario
    assert client.post(f"/user/{code}/multiplica").status_code == 422


def test_leaderboard_page_unknown_period_shows_total(client, store):
    register_user(store, "Ann")
    res = client.get("/", params={"periodo": "anio"})
    assert res.status_code == 200
    assert 'href="/?periodo=total" class="active"' in res.text


def test_leaderboard_page_footer_average(client, store):
    ann = register_user(store, "Ann").codigo_usuario
    ben = register_user(store, "Ben").codigo_usuario
    for _ in range(3):
        adjust_points(store, ann, "suma")
    adjust_points(store, ben, "suma")
    res = client.get("/")
    assert "Puntos totales: <strong>4</strong>" in res.text
    assert "Promedio: <strong>2</strong>" in res.text


def test_admin_page_average(client, store):
    code = register_user(store, "Ann").codigo_usuario
    adjust_points(store, code, "suma")
    register_user(store, "Ben")
    res = client.get("/admin")
    assert "Promedio: <strong>1</strong>" in res.text


def test_dates_use_spanish_month_names():
    assert format_date(datetime(2024, 1, 5, 14, 30)) == "05 ene 2024 14:30"
    assert format_date(datetime(2024, 8, 17, 9, 5)) == "17 ago 2024 09:05"
