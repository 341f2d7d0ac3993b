"""共享命名空间执行器。

每个配置文件都会被 compile 后 exec 到同一个命名空间字典中，
因此前面模块绑定的名字对后续模块可见。

未显式传入 namespace 时，各实例互相独立；loader 的默认执行器使用
进程级的 `GLOBAL_NAMESPACE`，跨多次 `load_modules` 调用保留绑定。
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from src.libs.executor.base_executor import BaseExecutor

NAMESPACE_NAME = "__modconf__"

# 进程级全局环境：默认加载路径下所有模块共享。
GLOBAL_NAMESPACE: dict[str, Any] = {"__name__": NAMESPACE_NAME}


class ExecExecutor(BaseExecutor):
    """以 exec 方式把配置文件执行到共享命名空间。

    参数说明：
    - settings: 全局配置对象（工厂创建时传入，本执行器不读取）。
    - namespace: 执行目标字典；为 None 时新建一个只属于本实例的命名空间。
    """

    def __init__(
        self,
        settings: Any = None,
        namespace: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        self.settings = settings
        self.namespace: dict[str, Any] = (
            namespace if namespace is not None else {"__name__": NAMESPACE_NAME}
        )

    def execute(self, file_path: Path) -> dict[str, Any]:
        """执行单个文件并返回命名空间。执行期间临时设置 `__file__`。"""

        path = self.validate_file(file_path)
        source = path.read_text(encoding="utf-8")
        code = compile(source, str(path), "exec")
        self.namespace["__file__"] = str(path)
        try:
            exec(code, self.namespace)
        finally:
            self.namespace.pop("__file__", None)
        return self.namespace
