"""Trigger 源 - 监听窗口管理器变化事件

负责：
- 启动 xev 子进程（每个 focus/property 事件输出一行）
- 每读到一行，向信号队列发送一个 Signal.TRIGGER
- 输出流关闭时发送 Signal.SHUTDOWN，结束刷新循环

行内容被忽略，只关心"有一行到达"。
"""

import asyncio
from abc import ABC, abstractmethod

from .. import config
from ..errors import TriggerSourceError
from ..telemetry import get_logger, metrics
from .types import Signal

logger = get_logger(__name__)


class TriggerSource(ABC):
    """Trigger 源基类

    每个源负责把外部事件转换为信号队列中的 Signal.TRIGGER。
    """

    source_name: str

    def __init__(self, queue: "asyncio.Queue[Signal]"):
        self.queue = queue

    @property
    @abstractmethod
    def is_running(self) -> bool:
        """事件流是否仍在转发"""
        pass

    @abstractmethod
    async def start(self) -> None:
        """启动监听"""
        pass

    @abstractmethod
    async def join(self) -> None:
        """等待事件流结束"""
        pass

    @abstractmethod
    async def stop(self) -> None:
        """停止监听"""
        pass


class ProcessTriggerSource(TriggerSource):
    """子进程 Trigger 源

    逐行读取子进程 stdout，每行发送一个 TRIGGER。
    信号队列无界、FIFO，不做背压；突发由 RefreshLoop 按时间丢弃。
    """

    source_name = "xev"

    def __init__(
        self,
        queue: "asyncio.Queue[Signal]",
        command: str = config.XEV_COMMAND,
        args: tuple[str, ...] = config.XEV_ARGS,
    ):
        super().__init__(queue)
        self._command = command
        self._args = args
        self._proc: asyncio.subprocess.Process | None = None
        self._reader_task: asyncio.Task | None = None

    @property
    def is_running(self) -> bool:
        return self._reader_task is not None and not self._reader_task.done()

    async def start(self) -> None:
        """启动子进程并开始转发

        Raises:
            TriggerSourceError: 子进程无法启动，或 stdout 无法捕获
        """
        try:
            self._proc = await asyncio.create_subprocess_exec(
                self._command,
                *self._args,
                stdout=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise TriggerSourceError(f"failed to spawn {self._command}: {e}") from e

        if self._proc.stdout is None:
            raise TriggerSourceError(f"failed to capture stdout of {self._command}")

        self._reader_task = asyncio.create_task(self._forward(self._proc.stdout))
        logger.info(f"[TriggerSource] {self._command} 监听已启动 (pid={self._proc.pid})")

    async def _forward(self, stdout: asyncio.StreamReader) -> None:
        """每行转发一个 TRIGGER，流结束后发送 SHUTDOWN"""
        try:
            while True:
                line = await stdout.readline()
                if not line:
                    break
                self.queue.put_nowait(Signal.TRIGGER)
                if config.METRICS_ENABLED:
                    metrics.inc("trigger.received", {"source": self.source_name})
                    metrics.gauge("trigger.queue_depth", self.queue.qsize(), {"source": self.source_name})
        finally:
            logger.info(f"[TriggerSource] {self._command} 输出流已关闭")
            self.queue.put_nowait(Signal.SHUTDOWN)

    async def join(self) -> None:
        """等待输出流关闭、子进程退出"""
        if self._reader_task:
            await self._reader_task
        if self._proc and self._proc.returncode is None:
            await self._proc.wait()

    async def stop(self) -> None:
        """终止子进程并停止转发"""
        if self._proc and self._proc.returncode is None:
            try:
                self._proc.terminate()
            except ProcessLookupError:
                pass
            await self._proc.wait()

        if self._reader_task:
            self._reader_task.cancel()
            try:
                await self._reader_task
            except asyncio.CancelledError:
                pass

        logger.info(f"[TriggerSource] {self._command} 监听已停止")
