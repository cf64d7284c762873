"""
Static reference data: skill vocabulary, synonyms, equivalence groups and
education tables.

Everything here is built once at import time and exposed through immutable
types (frozenset, tuple, MappingProxyType). Safe for any number of
concurrent readers.
"""
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Tuple

from core.text import normalize_skill


_PROGRAMMING_LANGUAGES = (
    "java", "python", "javascript", "typescript", "c++", "c#", "go", "golang", "rust", "kotlin", "scala",
    "php", "ruby", "swift", "dart", "r", "matlab", "perl", "bash", "shell scripting", "powershell",
    "html", "html5", "css", "css3", "sass", "less", "sql", "nosql", "pl/sql", "assembly",
)

_FRAMEWORKS = (
    "spring boot", "spring framework", "spring mvc", "spring security", "hibernate", "jpa", "jakarta ee",
    "react", "react.js", "angular", "angularjs", "vue", "vue.js", "next.js", "nuxt.js", "svelte",
    "node.js", "express.js", "nestjs", "django", "flask", "fastapi", "ruby on rails", "laravel", "symfony",
    "asp.net", "asp.net core", "entity framework", "jquery", "bootstrap", "tailwind css", "material ui",
    "flutter", "react native", "ionic", "xamarin", "swing", "javafx",
)

_DATABASES = (
    "mysql", "postgresql", "postgres", "mongodb", "redis", "oracle db", "microsoft sql server", "mssql",
    "sqlite", "mariadb", "cassandra", "elasticsearch", "dynamodb", "neo4j", "couchbase", "firebase",
    "cloud firestore", "realm", "h2",
)

_CLOUD_AND_DEVOPS = (
    "aws", "amazon web services", "azure", "google cloud platform", "gcp", "heroku", "digitalocean",
    "docker", "kubernetes", "k8s", "openshift", "jenkins", "gitlab ci", "github actions", "circleci",
    "travis ci", "terraform", "ansible", "chef", "puppet", "vagrant", "prometheus", "grafana", "elk stack",
    "nginx", "apache tomcat", "linux", "unix", "ubuntu", "centos",
)

_TOOLS_AND_PRACTICES = (
    "git", "github", "gitlab", "bitbucket", "jira", "confluence", "trello", "asana", "slack",
    "maven", "gradle", "ant", "npm", "yarn", "webpack", "babel",
    "junit", "testng", "mockito", "selenium", "cypress", "jest", "mocha", "cucumber", "postman", "swagger",
    "rest api", "restful api", "graphql", "soap", "json", "xml", "microservices", "agile", "scrum", "kanban",
    "tdd", "bdd", "ci/cd", "oop", "design patterns", "clean code", "solid principles",
)

_DATA_AND_ML = (
    "machine learning", "deep learning", "artificial intelligence", "data science", "nlp", "computer vision",
    "tensorflow", "pytorch", "keras", "scikit-learn", "pandas", "numpy", "matplotlib", "opencv",
    "apache spark", "hadoop", "apache kafka", "airflow", "tableau", "power bi",
)

TECHNICAL_SKILLS: FrozenSet[str] = frozenset(
    _PROGRAMMING_LANGUAGES + _FRAMEWORKS + _DATABASES
    + _CLOUD_AND_DEVOPS + _TOOLS_AND_PRACTICES + _DATA_AND_ML
)

# Spelling -> canonical spelling, applied to extracted tokens.
EXTRACTION_SYNONYMS: Mapping[str, str] = MappingProxyType({
    "js": "javascript",
    "ts": "typescript",
    "golang": "go",
    "reactjs": "react",
    "vuejs": "vue",
    "nodejs": "node.js",
    "expressjs": "express.js",
    "mssql": "sql server",
    "postgres": "postgresql",
    "aws": "amazon web services",
    "gcp": "google cloud platform",
    "k8s": "kubernetes",
    "repo": "git",
})

# Spellings treated as interchangeable when matching candidate and required skills.
SYNONYM_GROUPS: Tuple[FrozenSet[str], ...] = tuple(
    frozenset(normalize_skill(s) for s in group) for group in (
        ("spring", "spring boot", "spring mvc", "spring security", "spring framework"),
        ("node.js", "nodejs", "node"),
        ("mysql", "mariadb"),
        ("postgresql", "postgres"),
        ("sql server", "mssql", "microsoft sql server"),
        ("mongodb", "mongo"),
        (".net", "dotnet", "asp.net", "aspnet"),
        ("react", "reactjs", "react.js"),
        ("angular", "angularjs", "angular.js"),
        ("vue", "vuejs", "vue.js"),
        ("junit", "junit5", "junit 5"),
        ("testng", "test ng"),
        ("aws", "amazon web services"),
        ("gcp", "google cloud platform", "google cloud"),
        ("git", "gitlab", "github"),
        ("maven", "mvn"),
        ("gradle", "gradle build"),
        ("rest api", "rest", "restful api", "restful"),
        ("graphql", "graph ql"),
        ("microservices", "microservice", "micro services"),
        ("rabbitmq", "rabbit mq"),
        ("apache kafka", "kafka"),
    )
)


def _build_equivalence_index(groups: Tuple[FrozenSet[str], ...]) -> Mapping[str, FrozenSet[str]]:
    index: Dict[str, FrozenSet[str]] = {}
    for group in groups:
        for skill in group:
            index[skill] = group
    return MappingProxyType(index)


SKILL_EQUIVALENCE: Mapping[str, FrozenSet[str]] = _build_equivalence_index(SYNONYM_GROUPS)

# Keyword -> level label. Order matters: the first listed keyword that
# appears in the text wins, so higher degrees dominate lower ones.
EDUCATION_LEVEL_KEYWORDS: Tuple[Tuple[str, str], ...] = (
    ("phd", "PhD"),
    ("ph.d", "PhD"),
    ("doctorate", "PhD"),
    ("doctoral", "PhD"),
    ("d.phil", "PhD"),
    ("master", "Master"),
    ("masters", "Master"),
    ("m.sc", "Master"),
    ("m.s", "Master"),
    ("mba", "Master"),
    ("m.tech", "Master"),
    ("m.eng", "Master"),
    ("ms", "Master"),
    ("bachelor", "Bachelor"),
    ("bachelors", "Bachelor"),
    ("b.sc", "Bachelor"),
    ("b.s", "Bachelor"),
    ("b.tech", "Bachelor"),
    ("b.eng", "Bachelor"),
    ("b.e", "Bachelor"),
    ("bs", "Bachelor"),
    ("ba", "Bachelor"),
    ("b.com", "Bachelor"),
    ("diploma", "Diploma"),
    ("associate", "Associate"),
    ("certificate", "Certificate"),
)

# Higher number = higher level.
EDUCATION_HIERARCHY: Mapping[str, int] = MappingProxyType({
    "phd": 5,
    "master": 4,
    "bachelor": 3,
    "diploma": 2,
    "associate": 2,
    "certificate": 1,
})

# Searched in order; specific names before generic ones.
EDUCATION_FIELDS: Tuple[str, ...] = (
    "computer science", "software engineering", "information technology",
    "electrical engineering", "mechanical engineering", "civil engineering",
    "data science", "artificial intelligence", "machine learning",
    "business administration", "electronics", "telecommunications",
    "mathematics", "physics", "chemistry", "management", "engineering", "mba",
    "cs", "se", "it", "ee", "me", "ai", "ml",
)

# Field acronyms at or below this length are matched but never reported.
MIN_REPORTED_FIELD_LENGTH = 3
