from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    shopify_shop_domain: str = "example.myshopify.com"
    shopify_access_token: str = ""
    shopify_api_version: str = "2024-10"
    shopify_request_timeout: int = 30
    shopify_verify_ssl: bool = True
    inventory_levels_lookahead: int = 5
    backend_port: Optional[int] = None
    port: Optional[int] = None
    cors_origins: List[str] = [
        "http://localhost",
        "http://localhost:3000",
    ]
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def shopify_graphql_url(self) -> str:
        return (
            f"https://{self.shopify_shop_domain}"
            f"/admin/api/{self.shopify_api_version}/graphql.json"
        )

    @property
    def http_port(self) -> int:
        return self.backend_port or self.port or 3000


settings = Settings()
