# app/product_service/main.py
from types import MappingProxyType

from app.product_service.schemas import ProductOut
from app.services.static_responder import create_static_app
from app.utils.server import serve

# tylko do odczytu, budowane raz przy imporcie
PRODUCTS = (
    MappingProxyType({"id": 1, "name": "Avengers - endgame"}),
    MappingProxyType({"id": 2, "name": "Captain America"}),
    MappingProxyType({"id": 3, "name": "Captain Marvel"}),
)

app = create_static_app(
    title="Product Service",
    records=PRODUCTS,
    response_model=ProductOut,
    service_name="products",
)


def main():
    serve(app)


if __name__ == "__main__":
    main()
