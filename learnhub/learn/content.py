"""
learnhub/learn/content.py
All learning content: paths, modules, activities, plus lookup helpers.
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple

# ── Content registry ──────────────────────────────────────────────────────────
# Structure:
#   path     : id, title, description, modules
#   module   : id, title, description, points, estimated_time (minutes), activities
#   activity : id, type, title, points, data
#
# Activity types and their data payload:
#   reading         : content (markdown), estimated_time
#   vocabulary      : items [{term, definition}]
#   expandable      : cards [{title, summary, content}]
#   video           : description, video_url, duration, thumbnail
#   image-vocab     : items [{id, image_url, correct_label, options}]
#   quiz            : questions [{question, options, correct_answer, explanation}]
#   open-text       : prompt, placeholder, min_words
#   voice-recording : prompt, min_duration (seconds)
#
# Activity ids are unique across the whole catalogue.

ACTIVITY_TYPES = (
    "reading", "vocabulary", "expandable", "video",
    "image-vocab", "quiz", "open-text", "voice-recording",
)

# Types completed by a graded submission rather than a plain "done" call.
GRADED_TYPES = ("open-text", "voice-recording")

DEFAULT_MIN_WORDS = 50
DEFAULT_MIN_DURATION = 30


def _reading(id, title, points, content, minutes):
    return {"id": id, "type": "reading", "title": title, "points": points,
            "data": {"content": content, "estimated_time": minutes}}


def _vocab(id, title, points, pairs):
    return {"id": id, "type": "vocabulary", "title": title, "points": points,
            "data": {"items": [{"term": t, "definition": d} for t, d in pairs]}}


def _expandable(id, title, points, cards):
    return {"id": id, "type": "expandable", "title": title, "points": points,
            "data": {"cards": [{"title": t, "summary": s, "content": c} for t, s, c in cards]}}


def _image_vocab(id, title, points, items):
    return {"id": id, "type": "image-vocab", "title": title, "points": points,
            "data": {"items": [
                {"id": i, "image_url": url, "correct_label": label, "options": opts}
                for i, url, label, opts in items
            ]}}


def _quiz(id, title, points, questions):
    return {"id": id, "type": "quiz", "title": title, "points": points,
            "data": {"questions": [
                {"question": q, "options": opts, "correct_answer": ans, "explanation": why}
                for q, opts, ans, why in questions
            ]}}


def _open_text(id, title, points, prompt, placeholder, min_words):
    return {"id": id, "type": "open-text", "title": title, "points": points,
            "data": {"prompt": prompt, "placeholder": placeholder, "min_words": min_words}}


def _voice(id, title, points, prompt, min_duration):
    return {"id": id, "type": "voice-recording", "title": title, "points": points,
            "data": {"prompt": prompt, "min_duration": min_duration}}


LEARNING_PATHS: Dict[str, Dict[str, Any]] = {

    # ═══════════════════════════ PHASE 1 ═════════════════════════════════════

    "bs-detector": {
        "id": "bs-detector",
        "title": "Phase 1: The BS Detector",
        "description": (
            "Learn enough to know when the AI is lying, hallucinating, or writing "
            "insecure code. Master the new fundamentals."
        ),
        "modules": [
            {
                "id": "code-literacy",
                "title": "Code Literacy for the AI Era",
                "description": "Understand code well enough to audit AI output",
                "points": 85,
                "estimated_time": 40,
                "activities": [
                    _reading("read-code-literacy", "Why Code Literacy Still Matters", 15, """
# The AI-Augmented Architect: Code Literacy

Your new role is not to *write* every line. It is to *read, validate and curate*
what AI generates. If you build an app by prompting an LLM but don't understand
the code, you are **one bug away from total blockage**: you cannot debug what
you do not understand.

You need pattern recognition, security intuition, architecture understanding
and solid mental models. You are becoming a **Code Detective**.
""", 10),
                    _vocab("vocab-fundamentals", "Core Programming Concepts", 15, [
                        ("Variable", "A named container that stores data values in memory"),
                        ("Function", "A reusable block of code that performs a specific task"),
                        ("API", "Application Programming Interface - how software components communicate"),
                        ("Database", "Organized collection of structured data stored electronically"),
                        ("Authentication", "The process of verifying a user's identity"),
                        ("Authorization", "Determining what actions an authenticated user can perform"),
                        ("Endpoint", "A specific URL where an API receives requests"),
                        ("State", "Data that can change over time in an application"),
                    ]),
                    _expandable("expand-code-smells", "Red Flags in AI-Generated Code", 20, [
                        ("Hardcoded Secrets", "API keys and passwords visible in code",
                         "Never commit secrets. Use environment variables instead."),
                        ("SQL Injection Vulnerabilities", "User input directly in database queries",
                         "Always use parameterized queries or an ORM."),
                        ("Missing Error Handling", "No try/catch or error boundaries",
                         "AI often generates the happy path only. Look for unhandled failures."),
                        ("Unnecessary Dependencies", "Libraries imported for simple tasks",
                         "Every dependency is attack surface and maintenance cost."),
                    ]),
                    _quiz("quiz-code-literacy", "Code Literacy Assessment", 20, [
                        ("Why is code literacy still important in the AI era?",
                         ["AI always writes perfect code", "You need to audit and debug AI output",
                          "Code will be obsolete soon", "Only for getting jobs"],
                         "You need to audit and debug AI output",
                         "You cannot debug what you do not understand."),
                        ("What is the 'Black Box' liability?",
                         ["Using dark mode",
                          "Building apps you can't debug because you don't understand the code",
                          "Encrypted databases", "Closed-source software"],
                         "Building apps you can't debug because you don't understand the code",
                         "Relying on AI output you don't understand leaves you stuck at the first bug."),
                        ("Which is a security red flag in AI-generated code?",
                         ["Using TypeScript", "Hardcoded API keys in source files",
                          "Component-based architecture", "Using async/await"],
                         "Hardcoded API keys in source files",
                         "Secrets belong in environment variables."),
                    ]),
                    _open_text(
                        "open-text-audit", "Practice: Audit This Code", 15,
                        "Review this AI-generated code snippet and identify at least 3 problems:\n\n"
                        "```javascript\nasync function getUser(userId) {\n"
                        "  const query = `SELECT * FROM users WHERE id = '${userId}'`;\n"
                        "  const result = await db.query(query);\n"
                        "  const apiKey = 'sk-1234567890abcdef';\n"
                        "  return result[0];\n}\n```\n\n"
                        "Describe each problem and how to fix it.",
                        "Problem 1: I notice that...\n\nProblem 2: There's also...",
                        80,
                    ),
                ],
            },
            {
                "id": "security-foundations",
                "title": "Security Fundamentals",
                "description": "Spot vulnerabilities before they reach production",
                "points": 90,
                "estimated_time": 45,
                "activities": [
                    _reading("read-security-basics", "The Security Mindset", 15, """
# The Security Mindset

AI writes code that works, not code that is safe. Treat every input as hostile,
every secret as radioactive and every dependency as a potential liability.
""", 10),
                    _image_vocab("image-vocab-security", "Security Concepts Visual Guide", 20, [
                        ("sql-injection", "/database-security-shield-lock.jpg", "SQL Injection",
                         ["SQL Injection", "XSS Attack", "CSRF Token", "API Gateway"]),
                        ("encryption", "/encrypted-data-padlock-secure.jpg", "Encryption",
                         ["Encryption", "Hashing", "Tokenization", "Compression"]),
                        ("authentication", "/user-login-identity-verification.jpg", "Authentication",
                         ["Authentication", "Authorization", "Validation", "Verification"]),
                        ("firewall", "/firewall-network-protection-barrier.jpg", "Firewall",
                         ["Firewall", "Load Balancer", "CDN", "Proxy"]),
                    ]),
                    _expandable("expand-attack-vectors", "Common Attack Vectors", 20, [
                        ("Cross-Site Scripting (XSS)", "Injecting scripts into pages",
                         "Escape output and never render untrusted HTML."),
                        ("Cross-Site Request Forgery", "Forged requests from another site",
                         "Use CSRF tokens and SameSite cookies."),
                        ("Broken Access Control", "Users reaching data that isn't theirs",
                         "Check authorization on every request, server side."),
                    ]),
                    _quiz("quiz-security", "Security Knowledge Check", 20, [
                        ("Where should API keys live?",
                         ["In the source code", "In environment variables",
                          "In a public README", "In the browser's local storage"],
                         "In environment variables",
                         "Secrets must stay out of source control."),
                        ("What prevents SQL injection?",
                         ["String concatenation", "Parameterized queries",
                          "Longer passwords", "Client-side validation"],
                         "Parameterized queries",
                         "Parameters keep user data from being executed as SQL."),
                    ]),
                    _voice(
                        "voice-security-explain", "Speaking: Explain a Security Concept", 15,
                        "Choose one security vulnerability (SQL injection, XSS, or CSRF) and "
                        "explain it as if you're teaching a junior developer. Describe what it is, "
                        "why it's dangerous, and how to prevent it.",
                        45,
                    ),
                ],
            },
            {
                "id": "system-design-basics",
                "title": "System Design Fundamentals",
                "description": "Understanding how databases, APIs, and services connect",
                "points": 95,
                "estimated_time": 50,
                "activities": [
                    _reading("read-system-design", "Why System Design Matters for AI Users", 20, """
# Why System Design Matters

AI can write a function. It struggles to reason about how databases, queues,
caches and services fit together. That is where your judgement matters most.
""", 12),
                    _vocab("vocab-system-design", "System Design Vocabulary", 15, [
                        ("Load Balancer", "Distributes incoming traffic across multiple servers"),
                        ("Cache", "Fast temporary storage for frequently accessed data"),
                        ("Queue", "Holds tasks to be processed asynchronously"),
                        ("Latency", "Time taken for a request to travel and get a response"),
                    ]),
                    _expandable("expand-architecture-patterns", "Architecture Patterns Deep Dive", 25, [
                        ("Monolith", "One deployable unit", "Simple to start, harder to scale teams."),
                        ("Microservices", "Many small services", "Independent deploys, more moving parts."),
                        ("Serverless", "Functions on demand", "No servers to manage, cold starts to consider."),
                    ]),
                    _open_text(
                        "open-text-design", "Practice: Design a Simple System", 20,
                        "Design the architecture for a simple URL shortener (like bit.ly). Describe:\n\n"
                        "1. What database type would you use and why?\n"
                        "2. What happens when a user creates a short URL?\n"
                        "3. What happens when a user visits a short URL?",
                        "For the database, I would choose...",
                        100,
                    ),
                    _quiz("quiz-system-design", "System Design Assessment", 15, [
                        ("What does a cache improve?",
                         ["Security", "Read latency", "Code readability", "Test coverage"],
                         "Read latency",
                         "Caches serve frequent reads from fast storage."),
                    ]),
                ],
            },
        ],
    },

    # ═══════════════════════════ PHASE 2 ═════════════════════════════════════

    "ai-orchestration": {
        "id": "ai-orchestration",
        "title": "Phase 2: AI Orchestration",
        "description": (
            "Move from 'chatting' with AI to 'engineering' with it. Master context "
            "engineering, model routing, and professional AI workflows."
        ),
        "modules": [
            {
                "id": "context-engineering",
                "title": "Context Engineering Mastery",
                "description": "Provide AI with the information it needs to succeed",
                "points": 90,
                "estimated_time": 45,
                "activities": [
                    _reading("read-context-engineering", "The Art of Context Engineering", 20, """
# The Art of Context Engineering

The quality of AI output is bounded by the quality of its context. Give it the
goal, the constraints, the existing code and examples of what good looks like.
""", 12),
                    _vocab("vocab-context", "Context Engineering Terms", 15, [
                        ("Context Window", "The amount of text a model can consider at once"),
                        ("System Prompt", "Standing instructions that frame every response"),
                        ("Few-shot", "Giving the model worked examples in the prompt"),
                        ("Grounding", "Anchoring answers in supplied source material"),
                    ]),
                    _expandable("expand-prompting-patterns", "Advanced Prompting Patterns", 20, [
                        ("Role Prompting", "Tell the model who it is", "Sets tone and expertise level."),
                        ("Chain of Thought", "Ask for reasoning steps", "Improves multi-step problems."),
                        ("Output Schemas", "Specify the exact format", "Makes responses machine-readable."),
                    ]),
                    _open_text(
                        "open-text-context", "Practice: Write a Context-Rich Prompt", 20,
                        "You need to add a dark mode toggle to an existing React application. "
                        "Write a detailed, context-rich prompt using the CONTEXT framework that "
                        "would help an AI implement this feature correctly.",
                        "Context: I'm working on...",
                        100,
                    ),
                    _quiz("quiz-context", "Context Engineering Check", 15, [
                        ("What most limits the quality of AI output?",
                         ["The font size", "The quality of the context provided",
                          "The time of day", "The length of the variable names"],
                         "The quality of the context provided",
                         "Models can only work with what they are given."),
                    ]),
                ],
            },
            {
                "id": "model-routing",
                "title": "Model Routing & AI Selection",
                "description": "Use the right AI model for each task",
                "points": 100,
                "estimated_time": 50,
                "activities": [
                    _reading("read-model-routing", "Stop Using One Model for Everything", 20, """
# Stop Using One Model for Everything

Fast, cheap models for boilerplate. Strong reasoning models for architecture
and debugging. Specialised models for images, speech and search.
""", 12),
                    _image_vocab("image-vocab-tools", "AI Development Tools", 20, [
                        ("code-editor", "/ai-code-editor.jpg", "AI Code Editor",
                         ["AI Code Editor", "Terminal", "Browser", "Database"]),
                        ("chat-assistant", "/ai-chat-assistant.jpg", "Chat Assistant",
                         ["Chat Assistant", "Compiler", "Linter", "Debugger"]),
                    ]),
                    _expandable("expand-tool-deep-dive", "Tool Deep Dives", 25, [
                        ("Reasoning Models", "Slow but thorough", "Use for design and hard bugs."),
                        ("Fast Models", "Cheap and quick", "Use for boilerplate and refactors."),
                    ]),
                    _quiz("quiz-models", "Model Selection Quiz", 20, [
                        ("Which model suits generating simple boilerplate?",
                         ["The largest reasoning model", "A fast, inexpensive model",
                          "An image model", "A speech model"],
                         "A fast, inexpensive model",
                         "Match cost and speed to the difficulty of the task."),
                    ]),
                    _voice(
                        "voice-tool-recommendation", "Speaking: Recommend a Tool", 15,
                        "A friend wants to build their first web app—a simple task manager. They have "
                        "no coding experience. Which AI coding tool(s) would you recommend and why?",
                        45,
                    ),
                ],
            },
            {
                "id": "vibe-coding-maturity",
                "title": "Vibe Coding Maturity",
                "description": "Move beyond 'it looks right' to professional AI-assisted development",
                "points": 85,
                "estimated_time": 40,
                "activities": [
                    _reading("read-vibe-maturity", "From Amateur to Professional Vibe Coding", 20, """
# From Amateur to Professional Vibe Coding

Amateurs accept the first answer that runs. Professionals make the AI critique
its own output, write tests and review every diff.
""", 10),
                    _expandable("expand-critique-patterns", "Self-Critique Prompts", 20, [
                        ("Security Review", "Ask the AI to attack its own code",
                         "\"What are the security issues in the code you just wrote?\""),
                        ("Edge Cases", "Ask what inputs would break it",
                         "\"List five inputs that would make this function fail.\""),
                    ]),
                    _open_text(
                        "open-text-critique", "Practice: Self-Critique Workflow", 25,
                        "Imagine AI generated an authentication function that builds its SQL query "
                        "from the raw username. Write the sequence of critique prompts you would use "
                        "and what you expect each to reveal.",
                        "First, I would ask...",
                        120,
                    ),
                    _quiz("quiz-vibe-maturity", "Vibe Coding Maturity Check", 20, [
                        ("What separates professional from amateur vibe coding?",
                         ["Using more emojis", "Systematic review and testing of AI output",
                          "Typing faster", "Using a single model"],
                         "Systematic review and testing of AI output",
                         "Professionals verify; amateurs trust."),
                    ]),
                ],
            },
        ],
    },

    # ═══════════════════════════ PHASE 3 ═════════════════════════════════════

    "hybrid-workflow": {
        "id": "hybrid-workflow",
        "title": "Phase 3: The Hybrid Workflow",
        "description": (
            "Prevent your brain from atrophying. Practice manual coding to stay sharp "
            "and avoid the 'Junior Gap'."
        ),
        "modules": [
            {
                "id": "junior-gap",
                "title": "Understanding the Junior Gap",
                "description": "Why deliberate practice matters in the AI era",
                "points": 75,
                "estimated_time": 35,
                "activities": [
                    _reading("read-junior-gap", "The Junior Developer Crisis", 20, """
# The Junior Developer Crisis

When AI does all the easy work, juniors never build the foundations that turn
them into seniors. Deliberate practice closes that gap.
""", 10),
                    _vocab("vocab-career", "Career Development Terms", 15, [
                        ("Deliberate Practice", "Focused effort on skills just beyond your ability"),
                        ("Skill Atrophy", "Loss of ability from lack of use"),
                        ("Mentorship", "Guidance from a more experienced practitioner"),
                    ]),
                    _quiz("quiz-junior-gap", "Understanding the Challenge", 20, [
                        ("What is the 'Junior Gap'?",
                         ["A salary band", "Missing foundations because AI did the easy work",
                          "A gap year", "A networking event"],
                         "Missing foundations because AI did the easy work",
                         "Skipping fundamentals stalls long-term growth."),
                    ]),
                    _voice(
                        "voice-junior-gap", "Speaking: Advice for New Developers", 20,
                        "A friend just starting their coding journey asks: 'Should I just learn to "
                        "use AI tools, or do I need to learn actual programming?' What advice would "
                        "you give them and why?",
                        60,
                    ),
                ],
            },
            {
                "id": "sandwich-method",
                "title": "The Sandwich Method",
                "description": "A framework for learning with AI assistance",
                "points": 80,
                "estimated_time": 40,
                "activities": [
                    _reading("read-sandwich", "The Sandwich Method Explained", 20, """
# The Sandwich Method

Top bun: you plan the problem. Filling: AI helps implement. Bottom bun: you
review, test and explain every line.
""", 12),
                    _expandable("expand-sandwich-examples", "Sandwich Method Examples", 20, [
                        ("Top Bun", "Human planning", "Break the problem into clear steps first."),
                        ("Filling", "AI implementation", "Let AI draft the code for each step."),
                        ("Bottom Bun", "Human review", "Test, read and own the result."),
                    ]),
                    _open_text(
                        "open-text-sandwich", "Practice: Plan Your Sandwich", 25,
                        "You need to build a 'forgot password' feature for a web application. Write "
                        "out the complete Sandwich Method plan: top bun, filling and bottom bun.",
                        "Top Bun: ...",
                        150,
                    ),
                    _quiz("quiz-sandwich", "Sandwich Method Check", 15, [
                        ("Who owns the bottom bun?",
                         ["The AI", "You, reviewing and testing", "The project manager", "Nobody"],
                         "You, reviewing and testing",
                         "Verification stays with the human."),
                    ]),
                ],
            },
            {
                "id": "no-ai-friday",
                "title": "No-AI Friday: Manual Practice",
                "description": "Deliberate practice without AI assistance",
                "points": 90,
                "estimated_time": 45,
                "activities": [
                    _reading("read-no-ai", "Training with the Weights On", 20, """
# Training with the Weights On

One day a week, code without assistance. It is uncomfortable, and that
discomfort is exactly where skill grows.
""", 10),
                    _expandable("expand-practice-ideas", "No-AI Practice Ideas", 20, [
                        ("Kata", "Small repeated exercises", "Solve the same problem several ways."),
                        ("Rebuild", "Recreate a tool you use", "A tiny HTTP server, a todo CLI."),
                    ]),
                    _open_text(
                        "open-text-manual", "Reflection: Your Manual Coding Gaps", 25,
                        "Think about your recent coding experience. What syntax or patterns do you "
                        "always rely on AI or autocomplete to write? If all AI tools went offline "
                        "tomorrow, what would you struggle with?",
                        "I rely on AI for...",
                        100,
                    ),
                    _quiz("quiz-practice", "Practice Philosophy Check", 15, [
                        ("Why practise without AI?",
                         ["AI is banned on Fridays", "To keep core skills from atrophying",
                          "To go slower on purpose", "To avoid paying for tools"],
                         "To keep core skills from atrophying",
                         "Skills you never exercise fade."),
                    ]),
                    _voice(
                        "voice-commitment", "Speaking: Your Practice Commitment", 10,
                        "Record a commitment to yourself: When will you practice manual coding? "
                        "What specific skills will you focus on?",
                        30,
                    ),
                ],
            },
        ],
    },

    # ═══════════════════════════ TOOLS ═══════════════════════════════════════

    "ai-tools-mastery": {
        "id": "ai-tools-mastery",
        "title": "AI Tools Mastery",
        "description": "Hands-on practice with specific AI coding tools and platforms",
        "modules": [
            {
                "id": "vibe-coding-platforms",
                "title": "Vibe Coding Platforms",
                "description": "Master v0, Lovable, bolt.new and similar tools",
                "points": 85,
                "estimated_time": 45,
                "activities": [
                    _reading("read-vibe-platforms", "The Vibe Coding Landscape", 20, """
# The Vibe Coding Landscape

Prompt-to-app platforms turn a description into a running prototype in minutes.
Know what each is good at and where each one stops.
""", 12),
                    _expandable("expand-platform-features", "Platform Feature Comparison", 20, [
                        ("v0", "UI generation", "Strong at React components and layouts."),
                        ("Lovable", "Full-stack apps", "Generates frontends wired to a backend."),
                        ("bolt.new", "In-browser dev environment", "Runs and edits whole projects."),
                    ]),
                    _quiz("quiz-platforms", "Platform Selection Quiz", 20, [
                        ("Which is a prompt-to-app platform?",
                         ["bolt.new", "grep", "PostgreSQL", "nginx"],
                         "bolt.new",
                         "bolt.new builds and runs projects from prompts."),
                    ]),
                    _open_text(
                        "open-text-platform-plan", "Practice: Plan Your Tool Stack", 25,
                        "You're starting a new project: a simple SaaS application for tracking habits. "
                        "Plan which AI tools you would use for prototyping, UI design and production.",
                        "For prototyping I would use...",
                        100,
                    ),
                ],
            },
            {
                "id": "ai-code-editors",
                "title": "AI Code Editors",
                "description": "Master Cursor, GitHub Copilot, and AI-powered IDEs",
                "points": 90,
                "estimated_time": 45,
                "activities": [
                    _reading("read-code-editors", "AI Code Editors Deep Dive", 20, """
# AI Code Editors Deep Dive

Inline completion, chat with your codebase and agentic multi-file edits.
Learn which mode fits which task.
""", 12),
                    _vocab("vocab-editor-features", "AI Editor Terminology", 15, [
                        ("Inline Completion", "Suggestions that appear as you type"),
                        ("Agent Mode", "The editor plans and applies multi-file changes"),
                        ("Codebase Indexing", "Embedding your repo so the AI can search it"),
                    ]),
                    _expandable("expand-editor-tips", "Power User Tips", 20, [
                        ("Pin Context", "Attach the right files", "Less guessing, better edits."),
                        ("Review Diffs", "Never accept blind", "Read every change before applying."),
                    ]),
                    _quiz("quiz-editors", "Editor Knowledge Check", 20, [
                        ("What does agent mode do?",
                         ["Changes the theme", "Plans and applies multi-file changes",
                          "Uploads your code", "Runs the linter"],
                         "Plans and applies multi-file changes",
                         "Agents act across files, so review carefully."),
                    ]),
                    _voice(
                        "voice-editor-preference", "Speaking: Explain Your Preference", 15,
                        "Which AI code editor interests you most (Copilot, Cursor, Firebase Studio, "
                        "or Kiro) and why? What features appeal to your workflow?",
                        45,
                    ),
                ],
            },
            {
                "id": "automation-agents",
                "title": "Automation & AI Agents",
                "description": "Leverage n8n, Zapier, and autonomous AI agents",
                "points": 80,
                "estimated_time": 40,
                "activities": [
                    _reading("read-automation", "Automation and AI Agents", 20, """
# Automation and AI Agents

Triggers, actions and a model in the middle. Start with boring, repetitive
workflows and keep a human in the loop for anything irreversible.
""", 12),
                    _image_vocab("image-vocab-automation", "Automation Concepts", 15, [
                        ("trigger", "/automation-trigger.jpg", "Trigger",
                         ["Trigger", "Action", "Filter", "Webhook"]),
                        ("webhook", "/automation-webhook.jpg", "Webhook",
                         ["Webhook", "Cron Job", "Queue", "Trigger"]),
                    ]),
                    _expandable("expand-automation-examples", "Automation Examples", 20, [
                        ("Issue Triage", "Label new issues automatically", "Model reads and tags."),
                        ("Release Notes", "Summarise merged PRs", "Drafts notes for human review."),
                    ]),
                    _quiz("quiz-automation", "Automation Quiz", 15, [
                        ("What starts an automation workflow?",
                         ["A trigger", "A badge", "A stylesheet", "A commit message"],
                         "A trigger",
                         "Every workflow begins with a trigger event."),
                    ]),
                    _open_text(
                        "open-text-automation-plan", "Practice: Design an Automation", 10,
                        "Design an automation workflow for a developer team. Describe the trigger, "
                        "the automatic steps, the tools needed and where a human reviews the result.",
                        "The trigger is...",
                        80,
                    ),
                ],
            },
        ],
    },
}

# Static path → module-id table used for path progress.
PATH_MODULES: Dict[str, Tuple[str, ...]] = {
    pid: tuple(m["id"] for m in path["modules"])
    for pid, path in LEARNING_PATHS.items()
}


# ── Lookup helpers ────────────────────────────────────────────────────────────

def get_learning_path(path_id: str) -> Optional[Dict[str, Any]]:
    return LEARNING_PATHS.get(path_id)


def get_all_paths() -> List[Dict[str, Any]]:
    return list(LEARNING_PATHS.values())


def get_module(path_id: str, module_id: str) -> Optional[Dict[str, Any]]:
    path = LEARNING_PATHS.get(path_id)
    if not path:
        return None
    return next((m for m in path["modules"] if m["id"] == module_id), None)


def get_next_module(path_id: str, module_id: str) -> Optional[Dict[str, Any]]:
    """The module after module_id in its path; None for the last or an unknown id."""
    path = LEARNING_PATHS.get(path_id)
    if not path:
        return None
    ids = [m["id"] for m in path["modules"]]
    if module_id not in ids:
        return None
    idx = ids.index(module_id)
    if idx >= len(ids) - 1:
        return None
    return path["modules"][idx + 1]


def get_total_path_points(path_id: str) -> int:
    path = LEARNING_PATHS.get(path_id)
    if not path:
        return 0
    return sum(m["points"] for m in path["modules"])


def get_activity(path_id: str, module_id: str, activity_id: str) -> Optional[Dict[str, Any]]:
    mod = get_module(path_id, module_id)
    if not mod:
        return None
    return next((a for a in mod["activities"] if a["id"] == activity_id), None)


# ── Payload checks ────────────────────────────────────────────────────────────

def validate_activity(activity: Dict[str, Any]) -> Optional[str]:
    """
    Return an error message when the payload can't be rendered, else None.
    Callers show the message inline instead of failing the whole module.
    """
    kind = activity.get("type")
    data = activity.get("data")
    if kind not in ACTIVITY_TYPES:
        return f"Unknown activity type: {kind}"
    if not isinstance(data, dict):
        return "Invalid activity data"

    if kind == "quiz":
        questions = data.get("questions")
        if not isinstance(questions, list) or not questions:
            return "Invalid quiz question data"
        for q in questions:
            if not isinstance(q, dict) or not isinstance(q.get("options"), list):
                return "Invalid quiz question data"
    elif kind in ("vocabulary", "image-vocab"):
        items = data.get("items")
        if not isinstance(items, list) or not items:
            return "Invalid vocabulary data"
        if kind == "image-vocab" and any(
            not isinstance(i, dict) or not isinstance(i.get("options"), list) for i in items
        ):
            return "Invalid vocabulary data"
    elif kind == "expandable":
        if not isinstance(data.get("cards"), list):
            return "Invalid card data"
    elif kind == "video":
        if not data.get("video_url"):
            return "Invalid video data"
    elif kind in ("reading", "open-text", "voice-recording"):
        field = "content" if kind == "reading" else "prompt"
        if not data.get(field):
            return f"Invalid {kind} data"
    return None


def score_quiz(questions: List[Dict[str, Any]], answers: List[Optional[str]]) -> int:
    """Count answers matching correct_answer, position by position."""
    return sum(
        1 for q, a in zip(questions, answers)
        if a is not None and a == q.get("correct_answer")
    )
