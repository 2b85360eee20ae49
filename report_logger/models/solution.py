from report_logger.extensions import db


class Solution(db.Model):
    __tablename__ = "solutions"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)

    # The column is called `desc` in the database and on the wire
    description = db.Column("desc", db.String(500), nullable=False)

    category_id = db.Column(
        db.Integer,
        db.ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    category = db.relationship("Category", back_populates="solutions")

    def __repr__(self) -> str:
        return f"<Solution id={self.id} category={self.category_id}>"
