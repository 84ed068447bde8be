from typing import Optional

from ..exception.domain_exceptions import StateError


class PersistedEntity:
    """
    永続化状態の判定を一か所にまとめるためのミックスイン

    ``id`` が割り当てられているエンティティのみ更新・削除を許可します。
    """
    id: Optional[str]

    @property
    def is_persisted(self) -> bool:
        return bool(self.id)

    def ensure_persisted(self, action: str) -> None:
        if not self.is_persisted:
            raise self._not_persisted_error(action)

    def _not_persisted_error(self, action: str) -> StateError:
        return StateError(f"Cannot {action} {type(self).__name__} without ID")
