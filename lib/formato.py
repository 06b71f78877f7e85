from decimal import Decimal, InvalidOperation


def formato_euros(valor):
    """1234.5 -> '1.234,50 €'"""
    try:
        cantidad = Decimal(valor or 0)
    except (InvalidOperation, TypeError, ValueError):
        return valor
    texto = f"{cantidad:,.2f}"
    return texto.replace(",", "X").replace(".", ",").replace("X", ".") + " €"
