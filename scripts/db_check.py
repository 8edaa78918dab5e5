from sqlalchemy import create_engine, text
from dotenv import load_dotenv

load_dotenv()

from movie_catalog.core.config import DATABASE_URL  # noqa: E402

engine = create_engine(DATABASE_URL)
try:
    with engine.connect() as conn:
        count = conn.execute(text('SELECT COUNT(*) FROM movies')).scalar()
        print('movies in catalog:', count)
        res = conn.execute(text('SELECT DISTINCT genre FROM movies ORDER BY genre'))
        print('genres:', [row[0] for row in res])
except Exception as e:
    print('Catalog database check failed:', e)
finally:
    engine.dispose()
