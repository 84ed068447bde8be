from dataclasses import dataclass

@dataclass
class CreateUserDTO:
    """
    ユーザー登録用DTO
    """
    username: str
    raw_password: str
    name: str

@dataclass
class LoginDTO:
    """
    ログイン用DTO
    """
    username: str
    raw_password: str
