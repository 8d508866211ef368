"""Refresh 模块数据类型

- Signal: 信号通道中的消息（无 payload）
- LoopState: 刷新循环状态
"""

from enum import Enum


class Signal(Enum):
    """信号通道消息

    - TRIGGER: 窗口管理器报告了 focus/property 变化，重新计算
    - SHUTDOWN: 停止刷新循环（事件流关闭或主动停止）
    """
    TRIGGER = "trigger"
    SHUTDOWN = "shutdown"


class LoopState(Enum):
    """刷新循环状态

    - IDLE: 等待信号
    - COMPUTING: 正在执行 查询 → 选择 → 渲染 → 输出
    """
    IDLE = "idle"
    COMPUTING = "computing"
