# studio/utils/status.py
# Valores de status compartilhados entre os modelos do banco e o cliente.

STUDENT_STATUSES = ("Ativo", "Inativo", "Experimental")
STUDENT_DEFAULT_STATUS = "Ativo"
STUDENT_SOFT_DELETE_STATUS = "Inativo"

TRANSACTION_TYPES = ("Receita", "Despesa")
TRANSACTION_STATUSES = ("Pendente", "Pago")
TRANSACTION_DEFAULT_STATUS = "Pendente"


def toggled_transaction_status(current: str | None) -> str:
    """Pendente <-> Pago (qualquer outro valor vira Pendente)."""
    return "Pago" if current == "Pendente" else "Pendente"
