
from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Gate Queue API"
    app_env: str = "development"
    app_port: int = 8000
    frontend_url: str = "http://localhost:3000"

    # Database (SQLite for local dev, any async SQLAlchemy URL in production)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./gatequeue_dev.db",
        alias="DATABASE_URL",
    )
    drivers_fetch_limit: int = Field(default=500, alias="DRIVERS_FETCH_LIMIT")
    logs_fetch_limit: int = Field(default=100, alias="LOGS_FETCH_LIMIT")

    # Delivery-order photos (inline data URLs are stored here)
    max_upload_size_mb: int = Field(default=4, alias="MAX_UPLOAD_SIZE_MB")
    document_dir: str = Field(default="./documents", alias="DOCUMENT_DIR")
    document_base_url: str = Field(default="/documents", alias="DOCUMENT_BASE_URL")

    # Geofence around the warehouse
    warehouse_lat: float = Field(default=-6.226976, alias="WAREHOUSE_LAT")
    warehouse_lng: float = Field(default=106.5446167, alias="WAREHOUSE_LNG")
    geofence_radius_m: float = Field(default=1000.0, alias="GEOFENCE_RADIUS_M")

    # Queue numbering: drivers sent to this gate get the "A" prefix
    priority_gate: str = Field(default="GATE 2", alias="PRIORITY_GATE")

    # Fixed receivers for the internal PO entities
    pic_sbi: str = Field(default="Bu Santi", alias="PIC_SBI")
    pic_sdi: str = Field(default="Pak Azhari", alias="PIC_SDI")

    # WhatsApp gateway (Fonnte)
    fonnte_token: str | None = Field(default=None, alias="FONNTE_TOKEN")
    fonnte_url: str = Field(default="https://api.fonnte.com/send", alias="FONNTE_URL")
    wa_group_id: str = Field(default="120363423657558569@g.us", alias="WA_GROUP_ID")
    wa_country_code: str = Field(default="62", alias="WA_COUNTRY_CODE")
    notification_timeout: float = Field(default=10.0, alias="NOTIFICATION_TIMEOUT")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024

    @property
    def notifications_enabled(self) -> bool:
        """WhatsApp messages are only sent when a gateway token is configured."""
        return bool(self.fonnte_token)

settings = Settings()
