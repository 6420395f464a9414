"""データベースモデルを一括エクスポートするモジュール.

新しいモデルを追加する際は、ここにインポート文を1行追加するだけで
create_tables の対象になります。

Example:
-------
    新しいモデル `Team` を追加した場合:
    ```python
    from .team import Team
    ```

"""

from .hero import Hero

__all__ = ["Hero"]
