"""RefreshLoop - 事件驱动的刷新循环

状态机：
    IDLE --(信号, 距上次完成 >= 16ms)--> COMPUTING --(完成)--> IDLE
    IDLE --(信号, 距上次完成 < 16ms)--> IDLE（丢弃，无副作用）
    IDLE --(SHUTDOWN)--> 结束

设计要点：
1. 启动时无条件执行一次刷新，之后才开始消费信号
2. 每次刷新都是完整重算（查询 → 选择 → 渲染 → 输出），无缓存
3. 刷新串行执行，不会重叠
4. 刷新中的任何错误都向上传播（致命）
"""

import asyncio
import sys
import time
from collections.abc import Callable
from typing import TYPE_CHECKING, TextIO

from .. import config
from ..render import render_line
from ..telemetry import get_logger, metrics
from .types import LoopState, Signal

if TYPE_CHECKING:
    from ..client import WmClient

logger = get_logger(__name__)


class RefreshLoop:
    """刷新循环

    Attributes:
        width: bar 总字符宽度
        state: 当前状态（IDLE / COMPUTING）
    """

    def __init__(
        self,
        client: "WmClient",
        width: int,
        queue: "asyncio.Queue[Signal]",
        output: TextIO | None = None,
        min_interval: float = config.MIN_REFRESH_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        """初始化 RefreshLoop

        Args:
            client: WmClient，用于查询窗口状态
            width: bar 总字符宽度
            queue: 信号队列（由 TriggerSource 写入）
            output: 输出流，None 使用 sys.stdout
            min_interval: 两次刷新的最小间隔（秒）
            clock: 单调时钟（测试时可替换）
        """
        self.width = width
        self._client = client
        self._queue = queue
        self._output = output
        self._min_interval = min_interval
        self._clock = clock

        self._state = LoopState.IDLE
        self._last_cycle_at: float | None = None
        self._cycles = 0
        self._dropped = 0

    # === 属性 ===

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def cycles(self) -> int:
        """已完成的刷新次数（含启动时的一次）"""
        return self._cycles

    @property
    def dropped(self) -> int:
        """因防抖被丢弃的信号数"""
        return self._dropped

    # === 核心方法 ===

    async def run(self) -> None:
        """执行初始刷新，然后消费信号直到 SHUTDOWN"""
        await self.run_cycle()
        await self.listen()

    async def listen(self) -> None:
        """消费信号直到 SHUTDOWN（不执行初始刷新）"""
        while True:
            signal = await self._queue.get()
            if signal is Signal.SHUTDOWN:
                logger.info(f"[RefreshLoop] Stopped after {self._cycles} cycles")
                return
            await self.handle_trigger()

    async def handle_trigger(self) -> bool:
        """处理一个 TRIGGER

        Returns:
            是否执行了刷新（False 表示被防抖丢弃）
        """
        if self._last_cycle_at is not None:
            elapsed = self._clock() - self._last_cycle_at
            if elapsed < self._min_interval:
                self._dropped += 1
                if config.METRICS_ENABLED:
                    metrics.inc("refresh.dropped")
                logger.debug(f"[RefreshLoop] Dropped trigger ({elapsed * 1000:.1f}ms since last cycle)")
                return False

        await self.run_cycle()
        return True

    async def run_cycle(self) -> str:
        """执行一次完整刷新：查询 → 选择 → 渲染 → 输出

        Returns:
            输出的 bar 行
        """
        self._state = LoopState.COMPUTING
        try:
            state = await self._client.snapshot()
            line = render_line(state.this_desktop_windows, self.width)
            self._emit(line)
        finally:
            self._state = LoopState.IDLE

        self._last_cycle_at = self._clock()
        self._cycles += 1
        if config.METRICS_ENABLED:
            metrics.inc("refresh.cycles")
        return line

    def stop(self) -> None:
        """发送 SHUTDOWN，循环处理完已排队的信号后结束"""
        self._queue.put_nowait(Signal.SHUTDOWN)

    def _emit(self, line: str) -> None:
        output = self._output or sys.stdout
        output.write(line + "\n")
        output.flush()
