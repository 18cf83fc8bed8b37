from .session import Base, engine
from . import models  # noqa: F401  registers tables on Base.metadata


def init_db(bind=None):
    Base.metadata.create_all(bind=bind or engine)

if __name__ == "__main__":
    init_db()
