"""Prompt templates for topic detection and per-category reports."""

from __future__ import annotations

from typing import Dict

from ..models import Category

BULLET = "•"

TOPIC_DETECTION_PROMPT = """\
Analyze the following journal entries and identify the most important topics or concerns the user has addressed during this period.
Return only the main topics in a bulleted list, one per line, each line starting with "{bullet} ". Express each topic in a short word or phrase.
Example: "Mental Health", "Work", "Finances", "Shopping and Consumption".
---
{entries}
---
Identified topics:
"""

CONTEXT_WITH_ENTRIES = """\
Here is relevant information regarding the topic "{topic}" from the user's past journal entries:
{entries}

"""

CONTEXT_WITHOUT_ENTRIES = """\
Topic "{topic}" was identified, but not enough matching entries were found in the user's journal history.

"""

CATEGORY_INSTRUCTIONS: Dict[Category, str] = {
    Category.MENTAL_HEALTH: """\
Based on the journal entries related to mental health, please:
1. Analyze the user's overall emotional trend during this period.
2. Are there any specific events or factors mentioned that impacted the user's mental state?
3. Do you have any suggestions for improving the user's mental health based on their writings?
""",
    Category.WORK: """\
Based on the journal entries related to work, please:
1. List important work tasks and projects the user has mentioned.
2. Is there any progress observed in these projects?
3. Are there any challenges or strengths evident in the user's work environment?
""",
    Category.FINANCES: """\
Based on the journal entries related to finances, please:
1. Summarize any expenses or incomes the user has mentioned.
2. Is there a specific pattern in the user's spending or financial management?
3. Do you have any financial advice based on the user's writings?
""",
    Category.SHOPPING_CONSUMPTION: """\
Based on the journal entries related to shopping and consumption, please:
1. List important items the user intended to buy or has already bought.
2. Is there a specific consumption pattern for recurring items (like milk or peanut butter)?
3. Are there any reminders for purchasing items that might be running out?
""",
    Category.HEALTH_WELLBEING: """\
Based on the journal entries related to health and well-being, please:
1. Summarize the user's physical activity levels.
2. Are there any indications of physical discomfort or recovery?
3. Do you have any general health-related observations or suggestions?
""",
    Category.GENERAL: """\
Based on the journal entries related to the topic "{topic}", please provide a general summary and any interesting insights that can be inferred from the user's writings.
""",
}

CLOSING_INSTRUCTION = """
Please provide it in {language}, in a concise and clear manner, focusing on actionable insights and observations.
"""

__all__ = [
    "BULLET",
    "TOPIC_DETECTION_PROMPT",
    "CONTEXT_WITH_ENTRIES",
    "CONTEXT_WITHOUT_ENTRIES",
    "CATEGORY_INSTRUCTIONS",
    "CLOSING_INSTRUCTION",
]
