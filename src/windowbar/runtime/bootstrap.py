"""Bootstrap - 集中构造系统组件

职责：
- 创建 WmClient、信号队列、TriggerSource、RefreshLoop
- 返回 RuntimeComponents 供调用方使用

生命周期：RuntimeComponents.run() 启动 source，运行 loop，
loop 结束后 join source（事件流关闭）或终止它（loop 出错）。
"""

import asyncio
from dataclasses import dataclass
from typing import TextIO

from ..client import WmClient
from ..refresh import ProcessTriggerSource, RefreshLoop, Signal, TriggerSource
from ..telemetry import get_logger

logger = get_logger(__name__)


@dataclass
class RuntimeComponents:
    """Bootstrap 返回的运行时组件集合"""

    client: WmClient
    queue: "asyncio.Queue[Signal]"
    source: TriggerSource
    loop: RefreshLoop

    async def run(self) -> None:
        """先执行初始刷新，再启动 source 并消费信号

        错误向上传播；出错时先终止 source 子进程。
        loop 因 stop() 结束而事件流仍打开时，终止 source；
        事件流已关闭时，join source。
        """
        await self.loop.run_cycle()

        await self.source.start()
        try:
            await self.loop.listen()
        except BaseException:
            await self.source.stop()
            raise

        if self.source.is_running:
            await self.source.stop()
        else:
            await self.source.join()
            logger.info("[Bootstrap] Source joined")


def bootstrap(
    width: int,
    client: WmClient | None = None,
    source: TriggerSource | None = None,
    output: TextIO | None = None,
) -> RuntimeComponents:
    """构造运行时组件

    Args:
        width: bar 总字符宽度
        client: WmClient（可选，测试注入）
        source: TriggerSource（可选，测试注入；必须写入同一队列）
        output: 输出流（可选，默认 stdout）

    Returns:
        RuntimeComponents 包含所有构造好的组件
    """
    client = client or WmClient()
    queue: asyncio.Queue[Signal] = source.queue if source else asyncio.Queue()
    source = source or ProcessTriggerSource(queue)
    loop = RefreshLoop(client, width, queue, output=output)

    logger.info(f"[Bootstrap] Components created (width={width}, source={source.source_name})")

    return RuntimeComponents(client=client, queue=queue, source=source, loop=loop)
