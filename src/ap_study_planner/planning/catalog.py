"""Static AP topic catalogs and per-learning-style resource templates."""

from ap_study_planner.models.plan import AssessmentType, ResourceType
from ap_study_planner.models.profile import LearningStyle

# Ordered course units; each topic depends on the one before it.
TOPIC_CATALOG: dict[str, list[str]] = {
    "AP Calculus AB": [
        "Limits and Continuity",
        "Differentiation: Definition and Fundamental Properties",
        "Differentiation: Composite, Implicit, and Inverse Functions",
        "Contextual Applications of Differentiation",
        "Analytical Applications of Differentiation",
        "Integration and Accumulation of Change",
        "Differential Equations",
        "Applications of Integration",
    ],
    "AP Calculus BC": [
        "Limits and Continuity",
        "Differentiation Techniques",
        "Integration Techniques",
        "Differential Equations",
        "Parametric Equations, Polar Coordinates, and Vectors",
        "Infinite Sequences and Series",
    ],
    "AP Statistics": [
        "Exploring One-Variable Data",
        "Exploring Two-Variable Data",
        "Collecting Data",
        "Probability, Random Variables, and Probability Distributions",
        "Sampling Distributions",
        "Inference for Categorical Data",
        "Inference for Quantitative Data",
    ],
    "AP Physics 1": [
        "Kinematics",
        "Force and Translational Dynamics",
        "Work, Energy, and Power",
        "Linear Momentum",
        "Torque and Rotational Dynamics",
        "Oscillations",
        "Fluids",
    ],
    "AP Physics 2": [
        "Thermodynamics",
        "Electric Force, Field, and Potential",
        "Electric Circuits",
        "Magnetism and Electromagnetism",
        "Geometric Optics",
        "Waves, Sound, and Physical Optics",
        "Modern Physics",
    ],
    "AP Chemistry": [
        "Atomic Structure and Properties",
        "Molecular and Ionic Compound Structure",
        "Intermolecular Forces and Properties",
        "Chemical Reactions",
        "Kinetics",
        "Thermodynamics",
        "Equilibrium",
        "Acids and Bases",
    ],
    "AP Biology": [
        "Chemistry of Life",
        "Cell Structure and Function",
        "Cellular Energetics",
        "Cell Communication and Cell Cycle",
        "Heredity",
        "Gene Expression and Regulation",
        "Natural Selection",
        "Ecology",
    ],
    "AP Environmental Science": [
        "The Living World: Ecosystems",
        "The Living World: Biodiversity",
        "Populations",
        "Earth Systems and Resources",
        "Land and Water Use",
        "Energy Resources and Consumption",
        "Pollution",
        "Global Change",
    ],
    "AP Computer Science A": [
        "Primitive Types",
        "Using Objects",
        "Boolean Expressions and if Statements",
        "Iteration",
        "Writing Classes",
        "Array and ArrayList",
        "2D Array",
        "Recursion",
    ],
    "AP World History": [
        "The Global Tapestry",
        "Networks of Exchange",
        "Land-Based Empires",
        "Transoceanic Interconnections",
        "Revolutions",
        "Consequences of Industrialization",
        "Global Conflict",
        "Cold War and Decolonization",
    ],
    "AP US History": [
        "Colonial America",
        "The American Revolution",
        "The Early Republic",
        "Civil War and Reconstruction",
        "The Gilded Age",
        "World Wars and the Great Depression",
        "Postwar America and the Cold War",
        "Modern America",
    ],
    "AP US Government": [
        "Foundations of American Democracy",
        "Interactions Among Branches of Government",
        "Civil Liberties and Civil Rights",
        "American Political Ideologies and Beliefs",
        "Political Participation",
    ],
    "AP Macroeconomics": [
        "Basic Economic Concepts",
        "Economic Indicators and the Business Cycle",
        "National Income and Price Determination",
        "Financial Sector",
        "Stabilization Policies",
        "Open Economy: International Trade and Finance",
    ],
    "AP Microeconomics": [
        "Basic Economic Concepts",
        "Supply and Demand",
        "Production, Cost, and the Perfect Competition Model",
        "Imperfect Competition",
        "Factor Markets",
        "Market Failure and the Role of Government",
    ],
    "AP Psychology": [
        "Biological Bases of Behavior",
        "Cognition",
        "Development and Learning",
        "Social Psychology and Personality",
        "Mental and Physical Health",
    ],
    "AP English Literature": [
        "Short Fiction",
        "Poetry: Structure and Figurative Language",
        "Longer Fiction and Drama",
        "Literary Argument",
        "Comparative Analysis",
    ],
    "AP English Language": [
        "Rhetorical Situation",
        "Claims and Evidence",
        "Reasoning and Organization",
        "Style and Diction",
        "Synthesis Essay",
        "Rhetorical Analysis Essay",
        "Argument Essay",
    ],
}


def generic_catalog(subject: str) -> list[str]:
    """Three-step fallback catalog for subjects without a static one."""
    return [f"{subject} Fundamentals", f"{subject} Applications", f"{subject} Problem Solving"]


# (type, title, description, minutes); "{topic}" is substituted.
ResourceTemplate = tuple[ResourceType, str, str, int]
AssessmentTemplate = tuple[AssessmentType, str, int, int, int]  # type, title, questions, minutes, passing

BASE_RESOURCES: list[ResourceTemplate] = [
    (ResourceType.ARTICLE, "{topic} Study Guide", "Core notes and key terms for {topic}", 20),
    (ResourceType.PRACTICE, "{topic} Practice Problems", "AP-style practice problems on {topic}", 30),
]

STYLE_RESOURCES: dict[LearningStyle, list[ResourceTemplate]] = {
    LearningStyle.VISUAL: [
        (ResourceType.VIDEO, "{topic} Concept Video", "Animated walkthrough of {topic}", 15),
        (ResourceType.INTERACTIVE, "{topic} Diagram Explorer", "Labelled diagrams and graphs for {topic}", 20),
    ],
    LearningStyle.AUDITORY: [
        (ResourceType.AUDIO, "{topic} Audio Lecture", "Narrated lecture covering {topic}", 25),
        (ResourceType.VIDEO, "{topic} Study Group Discussion", "Recorded discussion of common {topic} questions", 20),
    ],
    LearningStyle.KINESTHETIC: [
        (ResourceType.SIMULATION, "{topic} Interactive Simulation", "Manipulate a live model of {topic}", 25),
        (ResourceType.PRACTICE, "{topic} Hands-on Lab", "Build and test examples of {topic}", 35),
    ],
    LearningStyle.READING: [
        (ResourceType.ARTICLE, "{topic} Textbook Chapter", "Assigned reading on {topic}", 30),
        (ResourceType.ARTICLE, "{topic} Annotated Notes", "Annotated summary notes for {topic}", 15),
    ],
}

BASE_ASSESSMENTS: list[AssessmentTemplate] = [
    (AssessmentType.QUIZ, "{topic} Knowledge Check", 10, 20, 75),
    (AssessmentType.PROBLEM_SET, "{topic} AP-Style Problem Set", 6, 40, 70),
]

STYLE_ASSESSMENTS: dict[LearningStyle, list[AssessmentTemplate]] = {
    LearningStyle.VISUAL: [(AssessmentType.PROJECT, "{topic} Concept Map", 1, 30, 70)],
    LearningStyle.AUDITORY: [(AssessmentType.PRESENTATION, "{topic} Teach-Back Explanation", 1, 15, 70)],
    LearningStyle.KINESTHETIC: [(AssessmentType.PROJECT, "{topic} Applied Project", 1, 60, 75)],
    LearningStyle.READING: [(AssessmentType.FREE_RESPONSE, "{topic} Written Free Response", 2, 35, 70)],
}

STYLE_OBJECTIVES: dict[LearningStyle, str] = {
    LearningStyle.VISUAL: "Visualize {topic} relationships with diagrams and graphs",
    LearningStyle.AUDITORY: "Explain {topic} verbally in your own words",
    LearningStyle.KINESTHETIC: "Apply {topic} through hands-on problems and experiments",
    LearningStyle.READING: "Analyze {topic} through written summaries and free responses",
}
