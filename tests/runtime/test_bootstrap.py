"""Bootstrap 测试"""

import asyncio
import io
import sys
from unittest.mock import AsyncMock

import pytest

from windowbar.client import WmClient
from windowbar.errors import CommandError
from windowbar.models import Desktop, Window, WindowDesktop, WindowId
from windowbar.refresh import ProcessTriggerSource, RefreshLoop, Signal, TriggerSource
from windowbar.runtime import RuntimeComponents, bootstrap
from windowbar.selection import build_desktop_state


class ScriptedSource(TriggerSource):
    """按脚本发送信号的测试源"""

    source_name = "scripted"

    def __init__(self, queue, signals, running=False, output=None):
        super().__init__(queue)
        self._signals = signals
        self._running = running
        self._output = output
        self.output_at_start = None
        self.started = False
        self.joined = False
        self.stopped = False

    @property
    def is_running(self) -> bool:
        return self._running

    async def start(self) -> None:
        self.started = True
        if self._output is not None:
            self.output_at_start = self._output.getvalue()
        for signal in self._signals:
            self.queue.put_nowait(signal)

    async def join(self) -> None:
        self.joined = True

    async def stop(self) -> None:
        self.stopped = True
        self._running = False


def _client():
    client = AsyncMock(spec=WmClient)
    client.snapshot.return_value = build_desktop_state(
        [Window(WindowId(1), WindowDesktop.id(0), "host", "vim")],
        [Desktop(0, True, "main")],
        WindowId(1),
    )
    return client


class TestBootstrap:
    """bootstrap() 测试"""

    def test_default_components(self):
        components = bootstrap(100)

        assert isinstance(components, RuntimeComponents)
        assert isinstance(components.client, WmClient)
        assert isinstance(components.source, ProcessTriggerSource)
        assert isinstance(components.loop, RefreshLoop)
        assert components.source.queue is components.queue
        assert components.loop.width == 100

    def test_injected_source_shares_queue(self):
        queue: asyncio.Queue[Signal] = asyncio.Queue()
        source = ScriptedSource(queue, [])

        components = bootstrap(80, client=_client(), source=source)

        assert components.queue is queue
        assert components.source is source


class TestRuntimeComponentsRun:
    """RuntimeComponents.run() 测试"""

    @pytest.mark.asyncio
    async def test_initial_cycle_before_source_start(self):
        """初始刷新在 source 启动前完成输出"""
        output = io.StringIO()
        source = ScriptedSource(asyncio.Queue(), [Signal.SHUTDOWN], output=output)
        components = bootstrap(12, client=_client(), source=source, output=output)

        await components.run()

        assert source.output_at_start is not None
        assert len(source.output_at_start.splitlines()) == 1

    @pytest.mark.asyncio
    async def test_run_until_stream_closes(self):
        """事件流关闭后 loop 结束并 join source"""
        output = io.StringIO()
        source = ScriptedSource(asyncio.Queue(), [Signal.TRIGGER, Signal.SHUTDOWN])
        components = bootstrap(12, client=_client(), source=source, output=output)

        await components.run()

        assert source.started and source.joined
        assert not source.stopped
        assert len(output.getvalue().splitlines()) >= 1

    @pytest.mark.asyncio
    async def test_loop_stop_stops_running_source(self):
        """loop.stop() 结束时事件流仍打开，则终止 source 而不是 join"""
        source = ScriptedSource(asyncio.Queue(), [Signal.SHUTDOWN], running=True)
        components = bootstrap(12, client=_client(), source=source, output=io.StringIO())

        await components.run()

        assert source.stopped
        assert not source.joined

    @pytest.mark.asyncio
    async def test_loop_stop_with_long_lived_process(self):
        """事件进程不退出时，loop.stop() 仍能结束 run()"""
        queue: asyncio.Queue[Signal] = asyncio.Queue()
        source = ProcessTriggerSource(
            queue, command=sys.executable, args=("-c", "import time; time.sleep(30)")
        )
        components = bootstrap(12, client=_client(), source=source, output=io.StringIO())

        task = asyncio.create_task(components.run())
        await asyncio.sleep(0.5)
        components.loop.stop()

        await asyncio.wait_for(task, timeout=5.0)

        assert source.is_running is False
        assert source._proc.returncode is not None

    @pytest.mark.asyncio
    async def test_initial_cycle_error_skips_source(self):
        """初始刷新失败时不启动 source，错误向上传播"""
        client = _client()
        client.snapshot.side_effect = CommandError("wmctrl -l", "Cannot open display.")
        source = ScriptedSource(asyncio.Queue(), [])
        components = bootstrap(12, client=client, source=source, output=io.StringIO())

        with pytest.raises(CommandError):
            await components.run()

        assert not source.started

    @pytest.mark.asyncio
    async def test_cycle_error_stops_source(self):
        """触发的刷新失败时终止 source 并传播错误"""
        client = _client()
        client.snapshot.side_effect = [
            client.snapshot.return_value,
            CommandError("wmctrl -l", "Cannot open display."),
        ]
        source = ScriptedSource(asyncio.Queue(), [Signal.TRIGGER], running=True)
        components = bootstrap(12, client=client, source=source, output=io.StringIO())
        components.loop._min_interval = 0.0

        with pytest.raises(CommandError):
            await components.run()

        assert source.stopped
        assert not source.joined
