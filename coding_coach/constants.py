LANGUAGE_MAP = {
    "py": "Python",
    "js": "JavaScript",
    "ts": "TypeScript",
    "jsx": "React/JSX",
    "tsx": "React/TypeScript",
    "java": "Java",
    "cpp": "C++",
    "cc": "C++",
    "cxx": "C++",
    "c": "C",
    "cs": "C#",
    "php": "PHP",
    "rb": "Ruby",
    "go": "Go",
    "rs": "Rust",
    "swift": "Swift",
    "kt": "Kotlin",
    "scala": "Scala",
    "r": "R",
    "m": "Objective-C",
    "h": "C/C++ Header",
    "hpp": "C++ Header",
}

LANGUAGE_EXPERT_FRAMING = "You are a {language} code review expert. "

LANGUAGE_IDIOM_NOTE = (
    "Do not flag issues that are widely used and accepted patterns in {language} "
    "even if it violates the criteria."
)

EVALUATION_CRITERIA = """Evaluation criteria:
1) Descriptive names - Use descriptive names for classes, functions, and variables
2) Function size - Functions should be focused. Try and avoid functions that are 200+ lines long. But also avoid small functions <5 lines of code if the function is only called once (unless it is a public function that is part of a class)
3) Make dependencies explicit - Avoid global state and hidden dependencies
4) Error handling - Generally try to avoid blanket swallowing all errors with empty try/catch blocks
5) Avoid too many levels of nesting of control structures/blocks. More than 2-3 levels is hard to follow
6) Make side effects obvious
7) Avoid magic numbers"""

OUTPUT_SHAPE = """For each improvement, include:
- category: which criterion it relates to
- issue: description of the problem
- suggestion: how to fix it
- severity: one of "high", "medium", "low"
- lineNumber: line number, only if applicable
- codeSnippet: the problematic code, only if applicable

Respond with JSON only, in exactly this shape:
{
  "score": <integer 0-100>,
  "summary": "<2-3 sentence overall assessment>",
  "improvements": [
    {
      "category": "string",
      "issue": "string",
      "suggestion": "string",
      "severity": "high|medium|low",
      "lineNumber": number,
      "codeSnippet": "string"
    }
  ]
}"""

PROMPT_TEMPLATE = """{framing}Please analyze the following code and provide:

1. An overall score out of 100 based on code quality
2. A short summary of the code's quality
3. Specific suggestions for improvement

{criteria}

{output_shape}

Code to analyze:
```
{content}
```"""

# Gemini structured-output schema (OpenAPI subset)
RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "score": {"type": "INTEGER"},
        "summary": {"type": "STRING"},
        "improvements": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "category": {"type": "STRING"},
                    "issue": {"type": "STRING"},
                    "suggestion": {"type": "STRING"},
                    "severity": {"type": "STRING", "enum": ["high", "medium", "low"]},
                    "lineNumber": {"type": "INTEGER"},
                    "codeSnippet": {"type": "STRING"},
                },
                "required": ["category", "issue", "suggestion", "severity"],
            },
        },
    },
    "required": ["score", "summary", "improvements"],
}
