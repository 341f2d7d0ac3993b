"""Executor 提供者工厂。

职责：
1) 维护 provider 注册表（名称 -> 类）。
2) 按 `settings.loader.executor` 创建具体执行器实例。
3) 在配置错误时给出清晰、可执行的报错信息。
"""

from __future__ import annotations

from typing import Any

from src.libs.executor.base_executor import BaseExecutor


class ExecutorFactory:
    """基于注册表的 Executor 工厂。

    使用方式（示意）：
    1. 在启动时注册 provider：
       `ExecutorFactory.register_provider("exec", ExecExecutor)`
    2. 在运行时按配置创建实例：
       `executor = ExecutorFactory.create(settings)`
    """

    # 注册表：key 为 provider 名称（统一小写），value 为执行器类。
    _PROVIDERS: dict[str, type[BaseExecutor]] = {}

    @classmethod
    def register_provider(
        cls,
        provider_name: str,
        provider_class: type[BaseExecutor],
    ) -> None:
        """注册执行器实现类。

        参数说明：
        - provider_name: 执行器名称（如 `exec` / `import`）。
        - provider_class: 执行器类，必须继承 BaseExecutor。
        """

        normalized_name = provider_name.strip().lower()
        if not normalized_name:
            raise ValueError("Provider name cannot be empty")

        if not isinstance(provider_class, type) or not issubclass(provider_class, BaseExecutor):
            raise ValueError("Provider class must inherit from BaseExecutor")

        cls._PROVIDERS[normalized_name] = provider_class

    @classmethod
    def create(cls, settings: Any, **overrides: Any) -> BaseExecutor:
        """根据配置创建执行器实例。

        参数说明：
        - settings: 全局配置对象，要求包含 `settings.loader.executor`。
        - **overrides: 单次覆盖构造参数（常用于测试）。
        """

        # 步骤 1：读取配置。
        loader_settings = getattr(settings, "loader", None)
        executor_raw = getattr(loader_settings, "executor", None)

        if not isinstance(executor_raw, str) or not executor_raw.strip():
            raise ValueError(
                "Missing required configuration: settings.loader.executor. "
                "Please set executor provider in settings.yaml"
            )

        executor_name = executor_raw.strip().lower()

        # 步骤 2：按名称查找注册表；未注册时列出可用项。
        executor_class = cls._PROVIDERS.get(executor_name)
        if executor_class is None:
            available_providers = cls.list_providers()
            available_text = ", ".join(available_providers) if available_providers else "none"
            raise ValueError(
                f"Unsupported Executor provider: '{executor_raw}'. "
                f"Available providers: {available_text}"
            )

        # 步骤 3：实例化并返回。
        executor_constructor: Any = executor_class
        return executor_constructor(settings=settings, **overrides)

    @classmethod
    def list_providers(cls) -> list[str]:
        """返回已注册 provider 名称列表（字母序）。"""

        return sorted(cls._PROVIDERS.keys())
