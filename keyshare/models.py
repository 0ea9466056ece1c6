from dataclasses import dataclass

@dataclass
class Record:
    id: str
    payload: str
    expires_at: int         # ms since epoch
    delete_token: str
    created_at: int         # ms since epoch

@dataclass(frozen=True)
class Snippet:
    payload: str
    expires_at: int
