# studio/client/store.py
from __future__ import annotations

import asyncio
import logging
from datetime import date
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Optional

import httpx

from studio.integrations.gemini import CLASS_DESCRIPTION_ERROR, MESSAGE_ERROR
from studio.utils.status import STUDENT_SOFT_DELETE_STATUS, toggled_transaction_status
from studio.utils.br import whatsapp_share_url
from . import exports, views
from .api import ApiError, StudioApiClient

logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]
Confirmer = Callable[[str], bool]


def _log_notice(message: str) -> None:
    logger.info("[CLIENT] %s", message)


class AppStore:
    """
    Estado da aplicação: alunos, agenda e lançamentos em memória.

    Cada ação do usuário é chamada HTTP + recarga completa da coleção afetada.
    Nada é mesclado localmente; em caso de falha a coleção fica como estava
    e o usuário recebe a mensagem pelo `notify`.
    """

    def __init__(self, api: StudioApiClient, notify: Optional[Notifier] = None,
                 confirm: Optional[Confirmer] = None):
        self.api = api
        self._notify = notify or _log_notice
        self._confirm = confirm or (lambda _msg: True)

        self.students: List[Dict[str, Any]] = []
        self.schedules: List[Dict[str, Any]] = []
        self.transactions: List[Dict[str, Any]] = []

        self.search: str = ""
        self.status_filter: str = views.ALL_STATUSES
        self.loading: bool = True
        self.generating: bool = False

    # ---------- leitura ----------
    async def load_all(self) -> None:
        await asyncio.gather(self.fetch_students(), self.fetch_schedules(), self.fetch_transactions())

    async def _fetch(self, label: str, call: Awaitable[List[Dict[str, Any]]]) -> List[Dict[str, Any]]:
        # falha de leitura: só log, lista vazia
        try:
            return await call or []
        except (ApiError, httpx.HTTPError) as e:
            logger.error("[CLIENT] Erro ao buscar %s: %s", label, e)
            return []

    async def fetch_students(self) -> None:
        try:
            self.students = await self._fetch("alunos", self.api.list_students())
        finally:
            self.loading = False

    async def fetch_schedules(self) -> None:
        self.schedules = await self._fetch("agenda", self.api.list_schedules())

    async def fetch_transactions(self) -> None:
        self.transactions = await self._fetch("lançamentos", self.api.list_transactions())

    # ---------- mutações ----------
    async def _mutate(self, call: Awaitable[Any], refetch: Callable[[], Awaitable[None]],
                      error_prefix: str, success_message: Optional[str] = None) -> bool:
        try:
            await call
        except ApiError as e:
            logger.error("[CLIENT] %s %s", error_prefix, e.message)
            self._notify(f"{error_prefix}: {e.message}")
            return False
        except httpx.HTTPError as e:
            logger.error("[CLIENT] Erro de rede: %s", e)
            self._notify(f"Erro de rede: {e}")
            return False

        # só depois da mutação resolvida
        await refetch()
        if success_message:
            self._notify(success_message)
        return True

    async def save_student(self, data: Dict[str, Any], student_id: Optional[int] = None) -> bool:
        """Cria (sem id) ou edita (com id) um aluno."""
        if student_id is not None:
            return await self._mutate(self.api.update_student(student_id, data), self.fetch_students,
                                      "Erro", "Aluno atualizado com sucesso!")
        return await self._mutate(self.api.create_student(data), self.fetch_students,
                                  "Erro", "Aluno cadastrado com sucesso!")

    async def deactivate_student(self, student_id: int) -> bool:
        # exclusão lógica: o registro continua, marcado como Inativo
        return await self._mutate(
            self.api.update_student(student_id, {"status": STUDENT_SOFT_DELETE_STATUS}),
            self.fetch_students, "Erro ao desativar", "Aluno desativado com sucesso!",
        )

    async def add_schedule(self, data: Dict[str, Any]) -> bool:
        return await self._mutate(self.api.create_schedule(data), self.fetch_schedules,
                                  "Erro ao agendar", "Aula agendada com sucesso!")

    async def add_transaction(self, data: Dict[str, Any]) -> bool:
        return await self._mutate(self.api.create_transaction(data), self.fetch_transactions,
                                  "Erro ao lançar", "Lançamento realizado com sucesso!")

    async def toggle_transaction_status(self, transaction_id: int, current_status: str) -> bool:
        return await self._mutate(
            self.api.update_transaction(transaction_id, {"status": toggled_transaction_status(current_status)}),
            self.fetch_transactions, "Erro ao atualizar status",
        )

    async def delete_transaction(self, transaction_id: int) -> bool:
        if not self._confirm("Tem certeza que deseja excluir este lançamento?"):
            return False
        return await self._mutate(self.api.delete_transaction(transaction_id),
                                  self.fetch_transactions, "Erro ao excluir")

    # ---------- projeções ----------
    @property
    def filtered_students(self) -> List[Dict[str, Any]]:
        return views.filter_students(self.students, self.search, self.status_filter)

    @property
    def stats(self) -> Dict[str, int]:
        return views.student_stats(self.students)

    @property
    def finance(self):
        return views.finance_summary(self.transactions)

    # ---------- exportação ----------
    def export_csv(self, directory: Path | str = ".", today: Optional[date] = None) -> Path:
        path = Path(directory) / exports.export_filename("csv", today)
        path.write_text(exports.students_to_csv(self.filtered_students), encoding="utf-8")
        return path

    def export_pdf(self, directory: Path | str = ".", today: Optional[date] = None) -> Path:
        path = Path(directory) / exports.export_filename("pdf", today)
        path.write_bytes(exports.students_to_pdf(self.filtered_students))
        return path

    # ---------- IA ----------
    def find_student(self, student_id) -> Optional[Dict[str, Any]]:
        try:
            sid = int(student_id)
        except (TypeError, ValueError):
            return None
        return next((s for s in self.students if s.get("id") == sid), None)

    async def generate_class_note(self, student_id, context: str = "") -> Optional[str]:
        if not student_id:
            self._notify("Selecione um aluno primeiro.")
            return None
        student = self.find_student(student_id)
        if not student:
            return None

        self.generating = True
        try:
            return await self.api.class_description(student.get("name") or "", context)
        except (ApiError, httpx.HTTPError) as e:
            logger.error("[CLIENT] Erro ao gerar descrição: %s", e)
            return CLASS_DESCRIPTION_ERROR
        finally:
            self.generating = False

    async def generate_outreach_message(self, student: Dict[str, Any], intent: str) -> str:
        self.generating = True
        try:
            return await self.api.whatsapp_message(student.get("name") or "", intent)
        except (ApiError, httpx.HTTPError) as e:
            logger.error("[CLIENT] Erro ao gerar mensagem: %s", e)
            return MESSAGE_ERROR
        finally:
            self.generating = False

    def whatsapp_link(self, message: str, student: Optional[Dict[str, Any]] = None) -> str:
        return whatsapp_share_url(message, (student or {}).get("phone"))
