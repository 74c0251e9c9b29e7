"""Curated country and category taxonomy, plus filter option building."""

from collections.abc import Iterable

from asiajobs.models import FilterOptions, Job, Taxonomy, TaxonomyGroup

NORTHEAST_ASIA = (
    "China", "Hong Kong SAR", "Macao SAR", "Taiwan", "Japan", "South Korea",
    "North Korea", "Mongolia",
)
SOUTHEAST_ASIA = (
    "Brunei", "Cambodia", "Indonesia", "Laos", "Malaysia", "Myanmar",
    "Philippines", "Singapore", "Thailand", "Timor-Leste", "Vietnam",
)
SOUTH_ASIA = (
    "India", "Pakistan", "Bangladesh", "Sri Lanka", "Nepal", "Bhutan",
    "Maldives", "Afghanistan",
)
CENTRAL_ASIA = ("Kazakhstan", "Uzbekistan", "Kyrgyzstan", "Tajikistan", "Turkmenistan")
WEST_ASIA = (
    "United Arab Emirates", "Saudi Arabia", "Qatar", "Oman", "Bahrain", "Kuwait",
    "Jordan", "Lebanon", "Israel", "Palestine", "Iran", "Iraq", "Turkey", "Syria",
    "Yemen", "Georgia", "Armenia", "Azerbaijan",
)

TAXONOMY = Taxonomy(
    country_groups=(
        TaxonomyGroup(label="Northeast Asia", items=NORTHEAST_ASIA),
        TaxonomyGroup(label="Southeast Asia", items=SOUTHEAST_ASIA),
        TaxonomyGroup(label="South Asia", items=SOUTH_ASIA),
        TaxonomyGroup(label="Central Asia", items=CENTRAL_ASIA),
        TaxonomyGroup(label="West Asia / Middle East", items=WEST_ASIA),
    ),
    category_groups=(
        TaxonomyGroup(label="Teaching & Academic", items=(
            "Early Years Teaching", "Primary Teaching", "Secondary Teaching",
            "IB (PYP/MYP/DP)", "IGCSE", "EAL / ESL", "K-12 Leadership",
            "University Faculty", "University Professional", "Research",
        )),
        TaxonomyGroup(label="International & Recruitment", items=(
            "Senior Management", "International Office", "Recruitment & Admissions",
            "Student Recruitment", "Agent Relations", "TNE / Partnerships",
            "Sales / Partnerships", "Business Development", "Alumni & Advancement",
            "Global Mobility / Study Abroad",
        )),
        TaxonomyGroup(label="Student Support & Services", items=(
            "Student Services & Welfare", "Counselling / Pastoral",
            "Career Services / Employability", "Scholarships / Financial Aid",
        )),
        TaxonomyGroup(label="Exams & Learning Support", items=(
            "Exams & Assessment", "Test Centre / IELTS", "Library / Learning Resources",
        )),
        TaxonomyGroup(label="Operations & Enablers", items=(
            "Program / Project Management", "Admin & Operations", "Finance", "HR",
            "IT / EdTech", "Quality Assurance / Compliance", "Data & CRM / Analytics",
            "Marketing & Communications", "Digital Marketing", "Events",
        )),
    ),
)


def curated_countries() -> tuple[str, ...]:
    """All curated country labels, in region order."""
    return TAXONOMY.countries


def curated_categories() -> tuple[str, ...]:
    """All curated category labels, in group order."""
    return TAXONOMY.categories


def build_filter_options(jobs: Iterable[Job], taxonomy: Taxonomy = TAXONOMY) -> FilterOptions:
    """Curated groups plus any country/category seen in the data but not curated."""
    jobs = list(jobs)
    return FilterOptions(
        country_groups=taxonomy.country_groups,
        country_extras=_extras((j.country for j in jobs), taxonomy.countries),
        category_groups=taxonomy.category_groups,
        category_extras=_extras((j.category for j in jobs), taxonomy.categories),
    )


def _extras(values: Iterable[str], curated: tuple[str, ...]) -> list[str]:
    curated_set = set(curated)
    seen = {v for v in values if v and v not in curated_set}
    return sorted(seen, key=str.casefold)
