"""认证与授权相关异常

所有对外消息保持笼统，不区分“用户不存在”和“密码错误”，
也不区分“签名无效”和“令牌过期”。
"""

from fastapi import status


class AuthError(Exception):
    """认证失败基类"""

    status_code: int = status.HTTP_401_UNAUTHORIZED
    message: str = "Authentication failed"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidCredentials(AuthError):
    message = "Invalid credentials"


class MissingToken(AuthError):
    message = "Access token required"


class InvalidToken(AuthError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Invalid token"


class ExpiredToken(InvalidToken):
    """令牌已过期，对客户端表现与 InvalidToken 相同"""


class NotFound(AuthError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Admin not found"
