"""配置文件执行器的基础抽象层。

“加载一个模块”到底意味着什么，由执行器决定：可以是把代码 exec 到共享命名空间，
也可以是按 import 机制导入成独立模块，或者导入后调用约定的初始化函数。
上层的 loader 只依赖 BaseExecutor（或任意 `execute(path)` 可调用对象），
不关心具体实现。

设计收益：
1. 执行方式可插拔，loader 的顺序与失败语义保持不变。
2. 方便测试（可快速构造记录调用顺序的 FakeExecutor）。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any


class BaseExecutor(ABC):
    """所有执行器实现都应继承的抽象基类。"""

    @staticmethod
    def validate_file(file_path: str | Path) -> Path:
        """校验待执行文件并返回 Path。

        - 文件不存在：抛出 FileNotFoundError。
        - 路径存在但不是普通文件：抛出 ValueError。
        """

        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise ValueError(f"Path is not a file: {path}")
        return path

    @abstractmethod
    def execute(self, file_path: Path) -> Any:
        """在当前进程中执行一个配置文件。

        被执行代码自身抛出的异常（语法错误、运行时错误）必须原样向上传播，
        执行器不得吞掉。
        """

    def __call__(self, file_path: Path) -> Any:
        return self.execute(file_path)
