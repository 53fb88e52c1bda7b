# -*- coding: utf-8 -*-
"""
Translation dictionaries for Chinese and English.

This module contains all user-facing strings produced by the calculator core.
"""

TRANSLATIONS = {
    "zh": {
        # Parse errors
        "error.malformed_format": "格式错误，请使用 hh:mm - hh:mm 格式",
        "error.out_of_range": "时间值无效，小时应为0-23，分钟应为0-59",

        # Entry labels
        "entry.next_day": "次日 ",
        "entry.duration": "{hours}时{minutes}分",
        "entry.arrow": "→",

        # Full-word duration units
        "duration.hours_full": "{hours}小时",
        "duration.minutes_full": "{minutes}分钟",
        "duration.separator": "",

        # Points
        "points.label": "{points}积分",
        "points.rule": "积分规则：起步6积分，每多1小时加2积分",
        "points.rule_partial": "不足1小时按比例计算",

        # Summary report
        "report.title": "计算结果",
        "report.total": "总计时间",
        "report.valid_count": "共 {count} 个有效时间段",
        "report.points": "积分计算结果",
        "report.empty": "没有时间段",

        # Clipboard
        "clipboard.copied": "已复制到剪贴板",
        "clipboard.failed": "复制失败",
    },
    "en": {
        # Parse errors
        "error.malformed_format": "Invalid format, please use hh:mm - hh:mm",
        "error.out_of_range": "Invalid time, hours must be 0-23 and minutes 0-59",

        # Entry labels
        "entry.next_day": "next day ",
        "entry.duration": "{hours}h {minutes}m",
        "entry.arrow": "→",

        # Full-word duration units
        "duration.hours_full": "{hours} hours",
        "duration.minutes_full": "{minutes} minutes",
        "duration.separator": " ",

        # Points
        "points.label": "{points} points",
        "points.rule": "Scoring: 6 points to start, 2 more per additional hour",
        "points.rule_partial": "Partial hours are prorated",

        # Summary report
        "report.title": "Results",
        "report.total": "Total time",
        "report.valid_count": "{count} valid time ranges",
        "report.points": "Points",
        "report.empty": "No time ranges",

        # Clipboard
        "clipboard.copied": "Copied to clipboard",
        "clipboard.failed": "Copy failed",
    },
}
