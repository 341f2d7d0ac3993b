"""Executor 抽象层对外导出。

统一导出基础抽象、工厂类和内置执行器，并在模块加载时注册默认 provider。
"""

from src.libs.executor.base_executor import BaseExecutor
from src.libs.executor.exec_executor import GLOBAL_NAMESPACE, ExecExecutor
from src.libs.executor.executor_factory import ExecutorFactory
from src.libs.executor.import_executor import ImportExecutor, InitializerExecutor

if "exec" not in ExecutorFactory._PROVIDERS:
    ExecutorFactory.register_provider("exec", ExecExecutor)
if "import" not in ExecutorFactory._PROVIDERS:
    ExecutorFactory.register_provider("import", ImportExecutor)
if "initializer" not in ExecutorFactory._PROVIDERS:
    ExecutorFactory.register_provider("initializer", InitializerExecutor)

__all__ = [
    "BaseExecutor",
    "ExecutorFactory",
    "ExecExecutor",
    "GLOBAL_NAMESPACE",
    "ImportExecutor",
    "InitializerExecutor",
]
