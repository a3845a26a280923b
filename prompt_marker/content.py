"""
Canned task content.

The question, template, framework guidance and model answer are fixed
texts. ``build_task_config`` combines them with the configured word gate
so the gate the engine applies and the guidance learners see come from
one place.
"""

from pydantic import BaseModel, ConfigDict

from prompt_marker.config import Settings
from prompt_marker.models import TaskConfig


QUESTION_TEXT = "\n".join(
    [
        "Scenario:",
        "You are responsible for organising a workplace social event for your organisation "
        "later this year. The event must bring together staff from different teams and "
        "seniority levels, including on-site and remote workers. Attendance is optional, "
        "but previous events have had low turnout.",
        "",
        "You have a fixed budget, a preferred city or region, and a date window, but you "
        "must decide on the type of venue and style of event. Some attendees have "
        "accessibility needs, dietary requirements, and caring responsibilities. Senior "
        "leaders want the event to feel professional without being formal.",
        "",
        "Your goal is to use AI to help identify and recommend a suitable venue that "
        "balances cost, accessibility, atmosphere, and engagement.",
        "",
        "Task:",
        "Write a prompt that asks AI to recommend one primary venue and one backup option. "
        "Your prompt must force the AI to justify its choices and explain trade-offs.",
        "",
        "Use the FEthink structure:",
        "Role: Tell AI who you are, or what role you want it to adopt.",
        "Task: What do you want AI to do?",
        "Context: Who is AI creating the content for?",
        "Format: How do you want the AI to present the information (structure, tone) - "
        "what specific information (constraints) are you requiring?",
        "",
        "Aim for at least {min_words} words.",
    ]
)

TEMPLATE_TEXT = "\n".join(["Role:", "Task:", "Context:", "Format:"])

MODEL_ANSWER = "\n".join(
    [
        "Role:",
        "Act as an experienced corporate events planner with expertise in inclusive "
        "workplace design, staff engagement, and budget-conscious venue selection.",
        "",
        "Task:",
        "Recommend one primary venue and one backup venue for a workplace social event.",
        "Justify each recommendation against cost, accessibility, inclusivity, atmosphere, "
        "and likelihood of attendance.",
        "Explain any trade-offs made and suggest a high-level structure for the event.",
        "",
        "Context (Audience):",
        "The event is for 60 staff from a mixed professional services organisation based "
        "in London.",
        "Attendees include senior leaders, early-career staff, and remote workers travelling in.",
        "The total budget is £4,000, including venue hire and light catering.",
        "The event will run from 5:30–8:30pm on a weekday.",
        "Requirements include step-free access, accessible toilets, vegetarian, vegan, halal, "
        "and alcohol-free options,",
        "and easy access from major transport links.",
        "Previous events have suffered from low attendance due to poor location choices and "
        "overly formal settings.",
        "",
        "Format:",
        "Present your response using the following structure:",
        "1. Brief summary of the recommended approach",
        "2. Primary venue recommendation with justification",
        "3. Backup venue recommendation and comparison",
        "4. Proposed event structure (arrival, main activity, close)",
        "5. Final justification explaining why these choices maximise engagement and attendance",
        "",
        "Use a clear, professional tone suitable for sharing with senior managers.",
        "Avoid unnecessary jargon and focus on practical decision-making.",
    ]
)

FRAMEWORK_TEXT = "\n".join(
    [
        "Strong prompts for complex workplace decisions do more than ask for ideas.",
        "They are designed to guide the AI towards making realistic, usable choices.",
        "",
        "Effective prompts usually:",
        "- assign a clear expert role",
        "- require the AI to make and justify decisions",
        "- include practical constraints such as budget, accessibility, and audience needs",
        "- ask for comparison, prioritisation, or trade-offs",
        "- control the structure and tone of the output",
        "",
        "If your prompt only asks for suggestions, the response is likely to be generic.",
        "Decision-focused prompts produce more specific and useful results.",
    ]
)


class TaskContent(BaseModel):
    """The static texts attached to verdicts and to the config surface."""

    model_config = ConfigDict(frozen=True)

    question_text: str = QUESTION_TEXT
    template_text: str = TEMPLATE_TEXT
    framework_text: str = FRAMEWORK_TEXT
    model_answer: str = MODEL_ANSWER


TASK_CONTENT = TaskContent()


def build_task_config(settings: Settings, content: TaskContent = TASK_CONTENT) -> TaskConfig:
    """Build the read-only task metadata from settings and canned content."""
    return TaskConfig(
        question_text=content.question_text.format(min_words=settings.min_words_gate),
        template_text=content.template_text,
        target_words=f"{settings.min_words_gate}–{settings.max_words}",
        min_words_gate=settings.min_words_gate,
        max_words=settings.max_words,
        course_back_url=settings.course_back_url,
        next_lesson_url=settings.next_lesson_url,
    )
