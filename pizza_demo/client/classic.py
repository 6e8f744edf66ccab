"""
Classic REST client — every URL is hardcoded.

This is the counterpart of the navigator: it has to know each path shape
(``/v1/track/{id}``, ``DELETE /v1/order/{id}``...) and has no way to learn
whether cancelling is still allowed until the server refuses.
"""

import httpx


class ApiError(Exception):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class ClassicPizzaClient:
    def __init__(self, base_url: str, client: httpx.AsyncClient) -> None:
        self.base_url = base_url.rstrip("/")
        self.client = client

    async def menu(self) -> list[dict]:
        return await self._request("GET", "/v1/menu")

    async def place_order(self, pizza_id: int, quantity: int) -> dict:
        return await self._request(
            "POST", "/v1/order", json={"pizzaId": pizza_id, "quantity": quantity}
        )

    async def track(self, order_id: str) -> dict:
        return await self._request("GET", f"/v1/track/{order_id}")

    async def cancel(self, order_id: str) -> dict:
        return await self._request("DELETE", f"/v1/order/{order_id}")

    async def _request(self, method: str, path: str, json: dict | None = None):
        resp = await self.client.request(method, f"{self.base_url}{path}", json=json)
        if resp.is_error:
            try:
                body = resp.json()
            except ValueError:
                body = None
            message = body.get("error", resp.text) if isinstance(body, dict) else resp.text
            raise ApiError(resp.status_code, message)
        return resp.json()
