# studio/client/views.py
"""Projeções puras sobre as coleções em memória; recalculadas a cada chamada."""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Iterable, List

ALL_STATUSES = "Todos"


def filter_students(students: Iterable[Dict[str, Any]], search: str = "",
                    status: str = ALL_STATUSES) -> List[Dict[str, Any]]:
    term = (search or "").lower()
    out = []
    for s in students:
        matches_search = term in (s.get("name") or "").lower() or term in (s.get("email") or "").lower()
        matches_status = status == ALL_STATUSES or s.get("status") == status
        if matches_search and matches_status:
            out.append(s)
    return out


def student_stats(students: Iterable[Dict[str, Any]]) -> Dict[str, int]:
    students = list(students)
    return {
        "total": len(students),
        "active": sum(1 for s in students if s.get("status") == "Ativo"),
        "trial": sum(1 for s in students if s.get("status") == "Experimental"),
        "inactive": sum(1 for s in students if s.get("status") == "Inativo"),
    }


def _amount(t: Dict[str, Any]) -> Decimal:
    # a API serializa amount como float; str() evita arrastar o erro binário
    return Decimal(str(t.get("amount") or 0))


def finance_summary(transactions: Iterable[Dict[str, Any]]) -> Dict[str, Decimal]:
    transactions = list(transactions)
    income = sum((_amount(t) for t in transactions if t.get("type") == "Receita"), Decimal("0"))
    expense = sum((_amount(t) for t in transactions if t.get("type") == "Despesa"), Decimal("0"))
    pending = sum((_amount(t) for t in transactions if t.get("status") == "Pendente"), Decimal("0"))
    return {
        "income": income,
        "expense": expense,
        "balance": income - expense,
        "pending": pending,
    }
