from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    supabase_url: str = "http://localhost:54321"
    supabase_anon_key: str = ""

    # Куда отправлять неаутентифицированных пользователей
    login_path: str = "/auth/login"
    access_token_cookie: str = "sb-access-token"

    # Источники данных в Supabase
    documents_table: str = "documents"
    trashed_documents_table: str = "trashed_documents"
    starred_documents_rpc: str = "get_starred_documents_with_users"
    shared_documents_rpc: str = "get_shared_documents_with_users"

    app_title: str = "DocCollab"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}

settings = Settings()
