# studio/client/api.py
from __future__ import annotations
from typing import Optional, Dict, Any, List
import httpx


class ApiError(RuntimeError):
    """Resposta não-2xx ou corpo ilegível da API; `message` é o campo `error` do corpo."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class StudioApiClient:
    """Cliente HTTP das rotas /api/students, /api/schedules e /api/transactions."""

    def __init__(self, base_url: str = "http://localhost:3000", api_prefix: str = "/api",
                 timeout: Optional[float] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.api_prefix = api_prefix
        # sem timeout por padrão: uma chamada presa segura a ação do usuário
        self._timeout = timeout
        self._transport = transport
        self._headers = {
            "accept": "application/json",
            "content-type": "application/json",
        }

    async def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        async with httpx.AsyncClient(base_url=self.base_url, headers=self._headers,
                                     timeout=self._timeout, transport=self._transport) as client:
            r = await client.request(method, f"{self.api_prefix}{path}", json=json)
        if r.status_code >= 400:
            try:
                data = r.json()
                message = data.get("error") if isinstance(data, dict) else None
            except ValueError:
                message = None
            raise ApiError(r.status_code, message or "Erro desconhecido")
        if r.status_code == 204 or not r.content:
            return None
        try:
            return r.json()
        except ValueError:
            raise ApiError(r.status_code, "Resposta inválida da API")

    # ---- alunos ----
    async def list_students(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/students")

    async def create_student(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", "/students", json=data)

    async def update_student(self, student_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PATCH", f"/students/{student_id}", json=data)

    async def delete_student(self, student_id: int) -> None:
        await self._request("DELETE", f"/students/{student_id}")

    # ---- agenda ----
    async def list_schedules(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/schedules")

    async def create_schedule(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", "/schedules", json=data)

    # ---- financeiro ----
    async def list_transactions(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/transactions")

    async def create_transaction(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", "/transactions", json=data)

    async def update_transaction(self, transaction_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PATCH", f"/transactions/{transaction_id}", json=data)

    async def delete_transaction(self, transaction_id: int) -> None:
        await self._request("DELETE", f"/transactions/{transaction_id}")

    # ---- IA ----
    async def class_description(self, student_name: str, context: str = "") -> str:
        data = await self._request("POST", "/ai/class-description",
                                   json={"student_name": student_name, "context": context})
        return data["text"]

    async def whatsapp_message(self, student_name: str, intent: str) -> str:
        data = await self._request("POST", "/ai/whatsapp-message",
                                   json={"student_name": student_name, "type": intent})
        return data["text"]
