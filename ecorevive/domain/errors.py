# ecorevive/domain/errors.py
"""
Bledy domenowe. Kazdy dotyczy pojedynczego requestu, zaden nie jest fatalny
dla procesu. Naruszenie wlasnosci (cudzy produkt, cudze zamowienie) to
wbudowany PermissionError.
"""


class MarketplaceError(Exception):
    """Bazowy blad domeny."""


class ValidationError(MarketplaceError, ValueError):
    """Niepoprawne dane wejsciowe (ilosc, adres, referencja platnosci)."""


class NotFoundError(MarketplaceError, LookupError):
    """Nieznane id produktu, pozycji koszyka, zamowienia lub uzytkownika."""


class PreconditionError(MarketplaceError):
    """Operacja niedozwolona w obecnym stanie (pusty koszyk, zly status)."""


class ConflictError(MarketplaceError):
    """Duplikat loginu/emaila albo trwajacy checkout tego samego uzytkownika."""


class PaymentError(MarketplaceError):
    """Bramka platnosci odrzucila zadanie lub byla niedostepna."""


class ServiceUnavailableError(MarketplaceError):
    """Zewnetrzna zaleznosc (redis) nie odpowiada, mozna sprobowac pozniej."""
