from extensions import db
from utils import utcnow

class Restaurant(db.Model):
    __tablename__ = 'restaurants'
    __table_args__ = {'sqlite_autoincrement': True}  # 刪除後的 id 不再重用

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(128), nullable=False)
    description = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False)
    updated_at = db.Column(db.DateTime, nullable=True)

    def __repr__(self):
        return f"<Restaurant {self.id} {self.name!r}>"

class Log(db.Model):
    __tablename__ = 'logs'
    id = db.Column(db.Integer, primary_key=True)
    time = db.Column(db.DateTime, default=utcnow)
    content = db.Column(db.String(500), nullable=False)
