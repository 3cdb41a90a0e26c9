from farmhub.core.config import get_settings
from farmhub.db.base import Base
from farmhub.db.session import make_engine
def init():
    Base.metadata.create_all(bind=make_engine(get_settings().DATABASE_URL))
if __name__ == "__main__":
    init()
    print("Database schema created.")
