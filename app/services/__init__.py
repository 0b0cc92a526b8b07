from app.services.directory_store import DirectoryStore
