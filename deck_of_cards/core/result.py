"""
定义通用的操作结果对象
"""
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .exceptions import DeckOfCardsError

T = TypeVar('T')


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """
    一个通用的操作结果类，用于封装可能失败的函数调用.

    失败的结果不携带数据，只有通过unwrap()才能取出数据，
    避免调用方把失败结果当作有效的卡牌使用。

    Attributes:
        success (bool): 表示操作是否成功。
        data (Optional[T]): 操作成功时返回的数据。
        message (Optional[str]): 操作失败时提供的可读错误信息。
        error_code (Optional[str]): 机器可读的错误代码。
        error (Optional[DeckOfCardsError]): 操作失败时捕获的异常。
    """
    success: bool
    data: Optional[T] = None
    message: Optional[str] = None
    error_code: Optional[str] = None
    error: Optional[DeckOfCardsError] = None

    @staticmethod
    def success_result(data: T, message: Optional[str] = None) -> 'OperationResult[T]':
        """创建一个表示成功的实例"""
        return OperationResult(success=True, data=data, message=message)

    @staticmethod
    def failure_result(error: DeckOfCardsError, error_code: str) -> 'OperationResult[T]':
        """创建一个表示失败的实例"""
        return OperationResult(success=False, message=str(error),
                               error_code=error_code, error=error)

    def is_successful(self) -> bool:
        """检查操作是否成功"""
        return self.success

    def unwrap(self) -> T:
        """
        取出成功结果中的数据.

        Returns:
            T: 操作成功时的数据

        Raises:
            DeckOfCardsError: 操作失败时重新抛出捕获的异常
        """
        if not self.success:
            if self.error is not None:
                raise self.error
            raise DeckOfCardsError(self.message or "操作失败")
        return self.data
