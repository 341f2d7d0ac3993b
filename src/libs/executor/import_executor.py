"""基于 import 机制的执行器。

`ImportExecutor` 通过 `importlib.util.spec_from_file_location` 把每个配置文件
导入为独立的模块对象，并注册到 `sys.modules`。
`InitializerExecutor` 在导入之后，再按名称查找并调用模块级初始化函数。
"""

from __future__ import annotations

import importlib.util
import re
import sys
from pathlib import Path
from types import ModuleType
from typing import Any

from src.libs.executor.base_executor import BaseExecutor

DEFAULT_PACKAGE_PREFIX = "modconf_modules"
DEFAULT_INITIALIZER = "setup"

_INVALID_CHARS = re.compile(r"\W")


def module_name_for(file_path: Path, package_prefix: str = DEFAULT_PACKAGE_PREFIX) -> str:
    """根据配置文件所在模块目录生成点分模块名（非法字符替换为下划线）。"""

    slug = _INVALID_CHARS.sub("_", file_path.parent.name) or "module"
    if slug[0].isdigit():
        slug = f"_{slug}"
    return f"{package_prefix}.{slug}"


class ImportExecutor(BaseExecutor):
    """把配置文件导入为全新的模块对象。

    执行失败时会从 `sys.modules` 中移除该模块，再原样抛出异常。
    成功导入的模块保存在 `self.modules` 中。
    """

    def __init__(
        self,
        settings: Any = None,
        package_prefix: str = DEFAULT_PACKAGE_PREFIX,
        **kwargs: Any,
    ) -> None:
        self.settings = settings
        self.package_prefix = package_prefix
        self.modules: dict[str, ModuleType] = {}

    def _import(self, path: Path) -> ModuleType:
        name = module_name_for(path, self.package_prefix)
        spec = importlib.util.spec_from_file_location(name, path)
        if spec is None or spec.loader is None:
            raise ImportError(f"Unable to load module spec for {path}")

        module = importlib.util.module_from_spec(spec)
        sys.modules[name] = module
        try:
            spec.loader.exec_module(module)
        except BaseException:
            sys.modules.pop(name, None)
            raise
        self.modules[name] = module
        return module

    def execute(self, file_path: Path) -> ModuleType:
        path = self.validate_file(file_path)
        return self._import(path)


class InitializerExecutor(ImportExecutor):
    """导入配置文件后，若定义了初始化函数（默认 `setup`）则调用它。

    同名属性存在但不可调用时抛出 TypeError；初始化函数自身的异常原样传播。
    """

    def __init__(
        self,
        settings: Any = None,
        package_prefix: str = DEFAULT_PACKAGE_PREFIX,
        initializer: str = DEFAULT_INITIALIZER,
        **kwargs: Any,
    ) -> None:
        super().__init__(settings=settings, package_prefix=package_prefix, **kwargs)
        self.initializer = initializer

    def execute(self, file_path: Path) -> ModuleType:
        module = super().execute(file_path)
        hook = getattr(module, self.initializer, None)
        if hook is None:
            return module
        if not callable(hook):
            raise TypeError(
                f"{module.__name__}.{self.initializer} is not callable "
                f"(defined in {module.__file__})"
            )
        hook()
        return module
