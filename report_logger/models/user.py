from report_logger.extensions import db


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(100), unique=True, nullable=False)

    # bcrypt hash, never the plain password
    password_hash = db.Column("pass", db.String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id} name={self.name}>"
