"""windowbar 配置

配置分为以下几类：
- 外部命令：wmctrl / xprop / xev 参数
- 刷新配置：防抖间隔
- 显示配置：段落颜色、留白
- 日志与指标
"""

import os

# === 外部命令配置 ===
WMCTRL_COMMAND = "wmctrl"
WMCTRL_LIST_WINDOWS_ARGS = ("-l",)
WMCTRL_LIST_DESKTOPS_ARGS = ("-d",)

XPROP_COMMAND = "xprop"
XPROP_ACTIVE_WINDOW_ARGS = ("-root", "_NET_ACTIVE_WINDOW")

# xev 每个 focus/property 事件输出一行（-1 = 单行模式）
XEV_COMMAND = "xev"
XEV_ARGS = ("-root", "-event", "focus", "-event", "property", "-1")

# === 刷新配置 ===
MIN_REFRESH_INTERVAL_SECONDS = 0.016  # 16ms，约 60 fps 上限

# === 显示配置 ===
SEGMENT_PADDING = 2  # 每个窗口段左右各留一个空格

FOCUSED_FOREGROUND = "#FFFFFF"
FOCUSED_BACKGROUND = "#4C5056"
UNFOCUSED_FOREGROUND = "#777777"
UNFOCUSED_BACKGROUND = "#282A2E"

# === 日志配置 ===
LOG_LEVEL = os.environ.get("WINDOWBAR_LOG_LEVEL", "WARNING")  # 日志级别（stdout 留给 bar 输出）

# === 指标配置 ===
METRICS_ENABLED = True  # 是否启用指标收集
