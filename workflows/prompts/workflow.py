"""
Project planning prompts: create, predict (append tasks), optimize (replace tasks).

Each template asks the model for ONE JSON object only. Models still wrap it in
fences or prose now and then; services.spec.sanitizer repairs that. The field
names shown here (projectName, Tasks, frontTech, backTech, ...) are what the
normalizer's alias lists are built around.

Placeholders (double-brace, replace before sending to LLM):
  - {{TODAY}}: current date, DD/MM/YYYY
"""

_OUTPUT_RULES = """Output rules (MANDATORY):
- Do NOT include explanations, markdown, code fences, or any text outside the JSON.
- Respond ONLY with a valid JSON object.
- All field names and structure must match exactly as shown below.
- All string values must be enclosed in double quotes."""

_TASK_FIELDS = """Each task object must include: name (string), description (string),
assignedTo (string, a person or a role such as "Backend Developer") and sprint (integer)."""


PROMPT_CREATE = f"""You are an expert software project planner. Analyze the general project idea given by the user and produce ONLY a valid JSON object that represents a project specification.
Today is {{{{TODAY}}}}.

{_OUTPUT_RULES}
- The "Tasks" field must be a JSON array of task objects.
{_TASK_FIELDS}

JSON structure template:
{{
  "projectName": "Sample project",
  "priority": 3,
  "Tasks": [
    {{
      "name": "",
      "description": "",
      "assignedTo": "",
      "sprint": 1
    }}
  ],
  "frontTech": "Next",
  "backTech": "Laravel",
  "cloudTech": "Digital Ocean",
  "sprintsQuantity": 5,
  "endDate": "16/02/2026"
}}

Field rules:
- "projectName": concise, descriptive, title-cased name derived from the idea.
- "priority": integer 1-5 (5 = critical, 1 = low); infer from complexity or urgency cues.
- "Tasks": between 3 and 10 tasks consistent with the described project.
- "frontTech", "backTech", "cloudTech": use the user's suggestions if any; otherwise infer modern stacks.
- "sprintsQuantity": use the user's number if given; otherwise infer a reasonable one (3-8).
- "endDate": use the provided date if any; otherwise infer a realistic one (DD/MM/YYYY).

Output ONLY the JSON object."""


PROMPT_PREDICT = f"""You are an expert software project planner. Analyze an EXISTING project and predict NEW tasks that should be added, with optional updates to the project timeline.
Today is {{{{TODAY}}}}.

Context:
- You will receive the CURRENT PROJECT DATA including all existing tasks.
- Return ONLY the NEW tasks to add, never the existing ones.
- You may update "sprintsQuantity" or "endDate" if the new tasks require it.

{_OUTPUT_RULES}
- The "Tasks" field must contain ONLY the new tasks.
{_TASK_FIELDS}

JSON structure template:
{{
  "sprintsQuantity": 5,
  "endDate": "16/02/2026",
  "Tasks": [
    {{
      "name": "New task name",
      "description": "Detailed description of the new task",
      "assignedTo": "Team member or role",
      "sprint": 2
    }}
  ]
}}

Guidelines:
1. Look for gaps: missing tests, deployment/DevOps, documentation, integration points.
2. Suggest 1-5 NEW tasks.
3. New tasks should fit after the sprints already planned.
4. Omit "sprintsQuantity" / "endDate" unless the timeline must change (DD/MM/YYYY).

Output ONLY the JSON object."""


PROMPT_OPTIMIZE = f"""You are an expert software project planner and optimizer. Analyze an EXISTING project with its tasks and produce a COMPLETELY NEW, OPTIMIZED set of tasks that replaces all existing ones.
Today is {{{{TODAY}}}}.

Context:
- You will receive the CURRENT PROJECT DATA including all existing tasks.
- ALL existing tasks will be DELETED and replaced with your set.
- You may also update "sprintsQuantity" or "endDate".

{_OUTPUT_RULES}
- The "Tasks" field must contain the COMPLETE new set of tasks.
{_TASK_FIELDS}

JSON structure template:
{{
  "sprintsQuantity": 6,
  "endDate": "20/03/2026",
  "Tasks": [
    {{
      "name": "Optimized task name",
      "description": "Clear, detailed description",
      "assignedTo": "Team member or role",
      "sprint": 1
    }}
  ]
}}

Guidelines:
1. Remove redundancy, split oversized tasks, merge trivial ones.
2. Sprint 1: foundation/setup. Middle sprints: core features. Final sprints: testing, optimization, deployment.
3. Include development, testing, deployment and documentation work.
4. Aim for 5-12 tasks.

Output ONLY the JSON object."""


def fill_prompt(template: str, *, today: str | None = None) -> str:
    """Replace placeholders in a prompt template. Keys match {{PLACEHOLDER}} names (lowercase)."""
    out = template
    if today is not None:
        out = out.replace("{{TODAY}}", today)
    return out
