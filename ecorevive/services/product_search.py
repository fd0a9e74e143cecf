# ecorevive/services/product_search.py
"""
Silnik wyszukiwania katalogu.

Filtry sa nakladane po kolei (AND), pominiety filtr nie ogranicza wyniku.
Tekst jest szukany jako podciag tytulu lub opisu, bez rozrozniania wielkosci
liter (bez rankingu, bez tokenizacji). Po filtrach dokladnie jedno sortowanie;
sorted() jest stabilne, wiec przy rownych kluczach zostaje kolejnosc wstawiania.
"""
from typing import Iterable, List

from ecorevive.data.models.product import ProductModel
from ecorevive.domain.enums import SortBy
from ecorevive.domain.schemas import ProductSearch

_SORT_KEYS = {
    SortBy.NEWEST: (lambda p: p.created_at, True),
    SortBy.PRICE_ASC: (lambda p: p.price, False),
    SortBy.PRICE_DESC: (lambda p: p.price, True),
    SortBy.POPULAR: (lambda p: p.rating, True),
}


def search_products(
    products: Iterable[ProductModel],
    filters: ProductSearch | None = None,
) -> List[ProductModel]:
    results = list(products)
    if filters is None:
        return results

    if filters.category is not None:
        results = [p for p in results if p.category == filters.category]

    if filters.price_min is not None:
        results = [p for p in results if p.price >= filters.price_min]

    if filters.price_max is not None:
        results = [p for p in results if p.price <= filters.price_max]

    if filters.condition is not None:
        results = [p for p in results if p.condition == filters.condition]

    location = (filters.location or "").strip().lower()
    if location:
        results = [p for p in results if location in p.location.lower()]

    if filters.featured is not None:
        results = [p for p in results if p.featured == filters.featured]

    if filters.is_new is not None:
        results = [p for p in results if p.is_new == filters.is_new]

    query = (filters.query or "").strip().lower()
    if query:
        results = [
            p for p in results
            if query in p.title.lower() or query in p.description.lower()
        ]

    if filters.sort_by is not None:
        key, reverse = _SORT_KEYS[filters.sort_by]
        # reverse=True w sorted() nie psuje stabilnosci
        results = sorted(results, key=key, reverse=reverse)

    return results
