"""Job category inference from titles.

CATEGORY_RULES is evaluated top to bottom and the first match wins, so
leadership signals come before the functional keywords they would otherwise
lose to ("Director of Marketing" is Senior Management, not Marketing).
"""

from __future__ import annotations

import re

_NOT_ASSISTANT = r"(?<!assistant )"


def _rule(pattern: str, label: str) -> tuple[re.Pattern, str]:
    return re.compile(pattern), label


CATEGORY_RULES: tuple[tuple[re.Pattern, str], ...] = (
    # Leadership
    _rule(
        r"principal|head of school|headteacher|deputy head|vice principal|\bdean\b|provost"
        rf"|{_NOT_ASSISTANT}\bdirector\b|\bchief\b",
        "Senior Management",
    ),
    _rule(
        rf"{_NOT_ASSISTANT}(?:head of|director of|\bvp\b|vice president)"
        r".*(?:admissions|recruitment|international|marketing|partnerships)",
        "Senior Management",
    ),
    _rule(r"head of (?:year|department|faculty)|curriculum lead", "K-12 Leadership"),
    # Teaching & academic
    _rule(r"early years|\beyfs\b", "Early Years Teaching"),
    _rule(r"(?:primary|elementary)(?: school)? (?:teacher|teaching)", "Primary Teaching"),
    _rule(r"(?:secondary|high school) (?:teacher|teaching)", "Secondary Teaching"),
    _rule(r"\bib\b|\bpyp\b|\bmyp\b|\bdp\b", "IB (PYP/MYP/DP)"),
    _rule(r"\bigcse\b", "IGCSE"),
    _rule(r"\besl\b|\beal\b|\bell\b|english language (?:teacher|instructor)", "EAL / ESL"),
    _rule(
        r"professor|lecturer|post-?doc|postdoctoral",
        "University Faculty",
    ),
    # International & recruitment
    _rule(r"recruitment|admissions|enrol?ment", "Recruitment & Admissions"),
    _rule(
        r"international (?:officer|manager|relations|partnerships|engagement)"
        r"|regional (?:manager|director)|country (?:manager|director)",
        "International Office",
    ),
    _rule(r"agent relations|agent manager|channel manager", "Agent Relations"),
    _rule(
        r"\btne\b|transnational education|articulation|dual degree|joint program|\bmou\b|partnerships",
        "TNE / Partnerships",
    ),
    _rule(r"\bsales\b|business development|\bbdm\b", "Sales / Partnerships"),
    _rule(r"alumni|advancement|fundraising", "Alumni & Advancement"),
    _rule(r"study abroad|global mobility|exchange (?:program|coordinator)", "Global Mobility / Study Abroad"),
    # Student support
    _rule(r"student services|student affairs|welfare|pastoral|wellbeing", "Student Services & Welfare"),
    _rule(r"counsell?or|counsell?ing|psycholog", "Counselling / Pastoral"),
    _rule(r"career services|careers advisor|employability", "Career Services / Employability"),
    _rule(r"scholarship|financial aid|bursary", "Scholarships / Financial Aid"),
    # Exams & learning support
    _rule(r"ielts|\bexams? officer|assessment|invigilator|test[ -]centre|testing", "Exams & Assessment"),
    _rule(r"library|librarian|learning resources", "Library / Learning Resources"),
    # Operations & enablers
    _rule(r"(?:project|programme|program) (?:manager|officer|coordinator)", "Program / Project Management"),
    _rule(r"administrator|\badmin\b|operations|office manager", "Admin & Operations"),
    _rule(r"finance|accountant|bursar", "Finance"),
    _rule(r"human resources|\bhr\b|people partner", "HR"),
    _rule(r"\bit\b|edtech|\bsystems?\b|developer|engineer", "IT / EdTech"),
    _rule(r"quality assurance|\bqa\b|accreditation|compliance|\bukvi\b|\bvisa\b", "Quality Assurance / Compliance"),
    _rule(r"\bcrm\b|salesforce|hubspot|\bdata\b|analytics|insight|power bi|tableau|\bsql\b", "Data & CRM / Analytics"),
    _rule(r"marketing|communications|marcom|\bbrand\b", "Marketing & Communications"),
    _rule(
        r"digital marketing|\bseo\b|\bsem\b|\bppc\b|social media|content|copywriter|graphic|designer|\bweb\b",
        "Digital Marketing",
    ),
    _rule(r"\bevents?\b|\bfairs?\b|exhibition|roadshow", "Events"),
    _rule(r"research (?:assistant|associate)|research fellow", "Research"),
)


def classify_category(title: str | None) -> str:
    """Return the first matching curated category for a job title, or ""."""
    t = (title or "").lower()
    if not t:
        return ""
    for pattern, label in CATEGORY_RULES:
        if pattern.search(t):
            return label
    return ""
