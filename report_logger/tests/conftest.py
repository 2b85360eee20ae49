import io
import tempfile
from datetime import datetime

import pytest
from PIL import Image
from sqlalchemy.pool import StaticPool

from report_logger import create_app
from report_logger.config import TestConfig as BaseTestConfig
from report_logger.extensions import db, bcrypt

# Import models so SQLAlchemy registers every table
import report_logger.models  # noqa: F401
from report_logger.models import Category, Issue, Solution, Report, User


class PytestConfig(BaseTestConfig):
	SQLALCHEMY_DATABASE_URI = "sqlite://"
	SQLALCHEMY_ENGINE_OPTIONS = {
		"connect_args": {"check_same_thread": False},
		"poolclass": StaticPool,
	}
	JWT_SECRET_KEY = "test-secret"
	UPLOAD_FOLDER = tempfile.mkdtemp(prefix="report-logger-uploads-")


@pytest.fixture(scope="session")
def app():
	app = create_app(PytestConfig)
	with app.app_context():
		db.create_all()
		yield app
		db.session.remove()
		db.drop_all()


@pytest.fixture()
def client(app):
	return app.test_client()


@pytest.fixture()
def db_session(app):
	with app.app_context():
		yield db.session
		db.session.rollback()


@pytest.fixture(autouse=True)
def upload_dir(app, tmp_path):
	app.config["UPLOAD_FOLDER"] = str(tmp_path)
	return tmp_path


@pytest.fixture(autouse=True)
def _clean_tables(app):
	yield
	db.session.rollback()
	for table in reversed(db.metadata.sorted_tables):
		db.session.execute(table.delete())
	db.session.commit()


@pytest.fixture()
def make_category(db_session):
	def _make_category(name: str = "Network"):
		c = Category(name=name)
		db_session.add(c)
		db_session.commit()
		return c

	return _make_category


@pytest.fixture()
def make_issue(db_session):
	def _make_issue(category: Category, description: str = "No connection"):
		i = Issue(description=description, category_id=category.id)
		db_session.add(i)
		db_session.commit()
		return i

	return _make_issue


@pytest.fixture()
def make_solution(db_session):
	def _make_solution(category: Category, description: str = "Restarted router"):
		s = Solution(description=description, category_id=category.id)
		db_session.add(s)
		db_session.commit()
		return s

	return _make_solution


@pytest.fixture()
def lookups(make_category, make_issue, make_solution):
	"""A category with one issue and one solution."""
	category = make_category("Network")
	return {
		"category": category,
		"issue": make_issue(category, "No connection"),
		"solution": make_solution(category, "Restarted router"),
	}


@pytest.fixture()
def make_report(db_session, lookups):
	def _make_report(when: datetime = None, category=None, issue=None, solution=None, **fields):
		r = Report(
			category_id=(category or lookups["category"]).id,
			issue_id=(issue or lookups["issue"]).id,
			solution_id=(solution or lookups["solution"]).id,
			datetime=when or datetime.now(),
			**fields,
		)
		db_session.add(r)
		db_session.commit()
		return r

	return _make_report


@pytest.fixture()
def make_user(db_session):
	def _make_user(name: str = "alice", password: str = "Passw0rd!"):
		u = User(
			name=name,
			password_hash=bcrypt.generate_password_hash(password).decode("utf-8"),
		)
		db_session.add(u)
		db_session.commit()
		return u

	return _make_user


@pytest.fixture()
def image_file():
	def _image_file(size=(120, 80), fmt="JPEG", mode="RGB"):
		buf = io.BytesIO()
		Image.new(mode, size, (200, 30, 30) if mode == "RGB" else (200, 30, 30, 128)).save(buf, fmt)
		buf.seek(0)
		return buf

	return _image_file
