# app/review_service/main.py
from types import MappingProxyType

from app.review_service.schemas import ReviewOut
from app.services.static_responder import create_static_app
from app.utils.server import serve

# rekord 1 ma "title", pozostale "name" - tak zostaly zapisane, nie poprawiamy
# "product" wskazuje na id produktu, nikt tego nie sprawdza
REVIEWS = (
    MappingProxyType({
        "id": 1,
        "title": "Oh snap, what an ending",
        "description": "Great movie, loved it",
        "grade": 5,
        "product": 1,
    }),
    MappingProxyType({
        "id": 2,
        "name": "Best movie ever",
        "description": "Cap at his finest",
        "grade": 5,
        "product": 2,
    }),
    MappingProxyType({
        "id": 3,
        "name": "Meh",
        "description": "It was alright",
        "grade": 3,
        "product": 3,
    }),
)

app = create_static_app(
    title="Review Service",
    records=REVIEWS,
    response_model=ReviewOut,
    service_name="reviews",
)


def main():
    serve(app)


if __name__ == "__main__":
    main()
