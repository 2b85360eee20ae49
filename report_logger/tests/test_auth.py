from flask_jwt_extended import decode_token


def test_login_ok_returns_token(client, app, make_user):
	user = make_user("alice", "Passw0rd!")

	resp = client.post("/login", json={"username": "alice", "password": "Passw0rd!"})
	assert resp.status_code == 200
	body = resp.get_json()
	assert body["id"] == user.id
	assert body["username"] == "alice"
	assert "password" not in body

	with app.app_context():
		assert decode_token(body["access_token"])["sub"] == str(user.id)


def test_login_rejects_bad_credentials(client, make_user):
	make_user("bob", "Passw0rd!")

	wrong = client.post("/login", json={"username": "bob", "password": "nope"})
	assert wrong.status_code == 401
	assert wrong.get_json() == {"error": "Invalid username or password"}

	unknown = client.post("/login", json={"username": "carol", "password": "Passw0rd!"})
	assert unknown.status_code == 401


def test_login_rejects_plain_text_stored_password(client, db_session):
	from report_logger.models import User

	db_session.add(User(name="legacy", password_hash="secret"))
	db_session.commit()

	resp = client.post("/login", json={"username": "legacy", "password": "secret"})
	assert resp.status_code == 401


def test_login_requires_both_fields(client):
	assert client.post("/login", json={"username": "alice"}).status_code == 400
	assert client.post("/login", json={"password": "x"}).status_code == 400


def test_users_list_hides_passwords(client, make_user):
	make_user("zed")
	make_user("amy")

	resp = client.get("/users")
	assert resp.status_code == 200
	users = resp.get_json()
	assert [u["name"] for u in users] == ["amy", "zed"]
	assert all(set(u) == {"id", "name"} for u in users)
