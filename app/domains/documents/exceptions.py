class DocumentQueryError(Exception):
    """Ошибка чтения списка документов из Supabase"""
    
    def __init__(self, source: str, cause: Exception):
        super().__init__(f"Failed to load {source}: {cause}")
        self.source = source
        self.cause = cause
