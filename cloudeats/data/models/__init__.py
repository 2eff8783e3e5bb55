#import all models so SQLAlchemy registers them in Base.metadata

from cloudeats.data.models.user import UserModel

__all__ = ["UserModel"]
