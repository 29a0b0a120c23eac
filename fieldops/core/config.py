"""
Модуль конфигурации проекта.

Загружает настройки из переменных окружения с помощью Pydantic Settings.
Все значения имеют разумные значения по умолчанию, поэтому ядро можно
использовать без файла .env.
"""

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Основные настройки приложения.

    Атрибуты:
        display_timezone (str): Часовой пояс для отображения отметок редактирования.
        items_per_page (int): Размер страницы в списке заявок.
        phone_country_code (str): Код страны для телефонов и ссылок WhatsApp.
        log_level (str): Уровень логирования.
        service_types (list[str]): Сгенерированный список типов работ.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # --- Display Settings ---
    display_timezone: str = Field(
        default="Asia/Kolkata",
        description="Timezone for displaying audit timestamps to users",
    )
    items_per_page: int = Field(
        default=10, ge=1, description="Number of service requests per page"
    )
    phone_country_code: str = Field(
        default="91", description="Country dialing code without the plus sign"
    )

    log_level: str = Field(default="INFO", description="Root logging level")

    # --- Business Logic Settings ---
    service_types_str: str = Field(
        default=(
            "New Borewell Drilling,Motor Installation,Repair & Maintenance,"
            "Borewell Cleaning,Pipeline Extension"
        ),
        alias="SERVICE_TYPES",
        description="Comma-separated list of job categories",
    )

    @computed_field
    @property
    def service_types(self) -> list[str]:
        """Преобразует строку service_types_str в список строк."""
        if not self.service_types_str:
            return []
        return [item.strip() for item in self.service_types_str.split(",")]


# Единственный экземпляр настроек, который используется во всем приложении
settings = Settings()
