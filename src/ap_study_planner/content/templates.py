"""Static question templates and per-subject concept tables.

``{topic}`` and ``{subject}`` placeholders are filled at generation time.
"""

from ap_study_planner.models.content import QuestionType

QUESTION_TEMPLATES: dict[str, list[dict]] = {
    "AP Calculus AB": [
        {
            "question": "What is the derivative of f(x) = 3x^2 + 2x using basic power rule steps?",
            "options": ["3x + 2", "6x + 2", "6x^2 + 2", "x^3 + x^2"],
            "correct_answer": 1,
            "explanation": "Apply the power rule to each term: d/dx(3x^2) = 6x and d/dx(2x) = 2.",
        },
        {
            "question": "Which simple limit is equal to 1?",
            "options": ["lim x->0 1/x", "lim x->infinity x", "lim x->0 sin(x)/x", "lim x->0 cos(x)/x"],
            "correct_answer": 2,
            "explanation": "The squeeze theorem shows sin(x)/x approaches 1 as x approaches 0.",
        },
        {
            "question": "If F'(x) = f(x), what does the integral of f from a to b equal?",
            "options": ["F(a) - F(b)", "f(b) - f(a)", "F(b) + F(a)", "F(b) - F(a)"],
            "correct_answer": 3,
            "explanation": "This is the Fundamental Theorem of Calculus, part two.",
        },
    ],
    "AP Statistics": [
        {
            "question": "Which basic measure of center is most resistant to outliers?",
            "options": ["Mean", "Range", "Median", "Standard deviation"],
            "correct_answer": 2,
            "explanation": "The median depends only on the middle value(s), so extreme values barely move it.",
        },
        {
            "question": "A p-value of 0.03 at significance level 0.05 leads to which simple conclusion?",
            "options": [
                "Fail to reject the null hypothesis",
                "Reject the null hypothesis",
                "Accept the null hypothesis",
                "The test is invalid",
            ],
            "correct_answer": 1,
            "explanation": "Since 0.03 < 0.05 the result is statistically significant.",
        },
    ],
    "AP Physics 1": [
        {
            "question": "A basic free-body diagram for a book resting on a table shows which forces?",
            "options": [
                "Gravity down and normal force up",
                "Only gravity",
                "Gravity and friction",
                "Normal force and tension",
            ],
            "correct_answer": 0,
            "explanation": "At rest the net force is zero, so the normal force balances gravity.",
        },
        {
            "question": "In a simple elastic collision, which quantities are conserved?",
            "options": [
                "Only momentum",
                "Only kinetic energy",
                "Neither",
                "Momentum and kinetic energy",
            ],
            "correct_answer": 3,
            "explanation": "Elastic collisions conserve both total momentum and total kinetic energy.",
        },
    ],
    "AP Chemistry": [
        {
            "question": "Which basic particle determines an element's identity?",
            "options": ["Neutron", "Proton", "Electron", "Photon"],
            "correct_answer": 1,
            "explanation": "The number of protons (atomic number) defines the element.",
        },
        {
            "question": "Adding a catalyst to a simple reaction at equilibrium does what?",
            "options": [
                "Shifts equilibrium to products",
                "Changes the equilibrium constant",
                "Speeds up both directions equally",
                "Shifts equilibrium to reactants",
            ],
            "correct_answer": 2,
            "explanation": "A catalyst lowers activation energy for both directions without changing K.",
        },
    ],
    "AP Biology": [
        {
            "question": "Which organelle performs the basic work of cellular respiration?",
            "options": ["Ribosome", "Golgi apparatus", "Chloroplast", "Mitochondrion"],
            "correct_answer": 3,
            "explanation": "The mitochondrion hosts the Krebs cycle and the electron transport chain.",
        },
        {
            "question": "In a simple monohybrid cross of two heterozygotes, what phenotype ratio is expected?",
            "options": ["1:1", "3:1", "9:3:3:1", "1:2:1"],
            "correct_answer": 1,
            "explanation": "Aa x Aa gives 1 AA : 2 Aa : 1 aa, which is a 3:1 dominant to recessive phenotype ratio.",
        },
    ],
    "AP Computer Science A": [
        {
            "question": "What does this basic loop print? for (int i = 0; i < 3; i++) System.out.print(i);",
            "options": ["123", "012", "0123", "321"],
            "correct_answer": 1,
            "explanation": "i takes the values 0, 1 and 2; the loop stops when i reaches 3.",
        },
        {
            "question": "Which simple statement correctly creates an ArrayList of Strings?",
            "options": [
                "ArrayList<String> list = new ArrayList<String>();",
                "ArrayList list = new String[];",
                "List<String> list = ArrayList();",
                "String list = new ArrayList<>();",
            ],
            "correct_answer": 0,
            "explanation": "Generic collections are created with new and a type argument.",
        },
    ],
    "AP US History": [
        {
            "question": "Which basic principle did the Articles of Confederation emphasize?",
            "options": [
                "A powerful executive",
                "Strong state sovereignty",
                "A national bank",
                "Federal taxation power",
            ],
            "correct_answer": 1,
            "explanation": "The Articles deliberately kept the central government weak relative to the states.",
        },
    ],
    "AP English Language": [
        {
            "question": "Which simple choice best describes an appeal to ethos?",
            "options": [
                "Establishing the speaker's credibility",
                "Stirring the audience's emotions",
                "Using statistics and logic",
                "Repeating a key phrase",
            ],
            "correct_answer": 0,
            "explanation": "Ethos persuades by showing the speaker is trustworthy or authoritative.",
        },
        {
            "question": "What is the basic purpose of a thesis in an argument essay?",
            "options": [
                "Summarize the sources",
                "Introduce the author",
                "State a defensible claim",
                "List counterarguments",
            ],
            "correct_answer": 2,
            "explanation": "A thesis makes a claim that the rest of the essay defends with evidence.",
        },
    ],
}

GENERIC_TEMPLATE: dict = {
    "question": "Which statement best describes a basic principle of {topic}?",
    "options": [
        "It applies only to unrelated subjects",
        "It connects core definitions of {topic} to real applications",
        "It has no measurable effect",
        "It replaces all other principles in {subject}",
    ],
    "correct_answer": 1,
    "explanation": "Core principles of {topic} link definitions to how they are applied on the exam.",
}

SUBJECT_CONCEPTS: dict[str, list[str]] = {
    "AP Calculus AB": ["Limits", "Rates of change", "Accumulation"],
    "AP Statistics": ["Variability", "Sampling", "Statistical inference"],
    "AP Physics 1": ["Newton's laws", "Conservation laws", "Systems"],
    "AP Chemistry": ["Atomic structure", "Reactions", "Equilibrium"],
    "AP Biology": ["Energy flow", "Information transfer", "Evolution"],
    "AP Computer Science A": ["Control structures", "Objects", "Data collections"],
    "AP US History": ["Causation", "Continuity and change", "American identity"],
    "AP English Language": ["Rhetorical situation", "Claims and evidence", "Style"],
}

AP_SKILLS: dict[str, list[str]] = {
    "AP Calculus AB": ["Implementing mathematical processes", "Connecting representations", "Justification"],
    "AP Statistics": ["Selecting statistical methods", "Data analysis", "Statistical argumentation"],
    "AP Physics 1": ["Creating representations", "Mathematical routines", "Argumentation"],
    "AP Chemistry": ["Models and representations", "Question and method", "Mathematical routines"],
    "AP Biology": ["Concept explanation", "Visual representations", "Statistical tests and data analysis"],
    "AP Computer Science A": ["Program design", "Code logic", "Code testing"],
    "AP US History": ["Sourcing and situation", "Claims and evidence", "Contextualization"],
    "AP English Language": ["Rhetorical analysis", "Argumentation", "Synthesis"],
}

COMMON_MISTAKES: dict[str, list[str]] = {
    "AP Calculus AB": [
        "Forgetting the chain rule on composite functions",
        "Dropping the constant of integration",
        "Mixing up average and instantaneous rate of change",
    ],
    "AP Statistics": [
        "Confusing correlation with causation",
        "Not checking conditions before inference",
        "Stating conclusions without context",
    ],
    "AP Physics 1": [
        "Leaving forces out of free-body diagrams",
        "Mixing up mass and weight",
        "Ignoring sign conventions for direction",
    ],
    "AP Chemistry": [
        "Not balancing equations before stoichiometry",
        "Confusing intermolecular and intramolecular forces",
        "Dropping units in calculations",
    ],
    "AP Biology": [
        "Confusing mitosis with meiosis",
        "Mixing up transcription and translation",
        "Treating evolution as acting on individuals",
    ],
    "AP Computer Science A": [
        "Off-by-one errors in loop bounds",
        "Comparing Strings with == instead of equals",
        "Modifying an ArrayList while iterating over it",
    ],
    "AP US History": [
        "Summarizing events without making an argument",
        "Ignoring historical context for documents",
        "Mixing up the chronology of periods",
    ],
    "AP English Language": [
        "Summarizing the text instead of analyzing choices",
        "Writing a thesis that is not defensible",
        "Using evidence without commentary",
    ],
}

QUESTION_SET_CATEGORIES: list[tuple[str, str, QuestionType]] = [
    ("Conceptual Understanding", "Check your grasp of the key ideas in {topic}", QuestionType.MULTIPLE_CHOICE),
    ("Problem Solving", "Work through {topic} problems step by step", QuestionType.PROBLEM_SOLVING),
    ("Application", "Apply {topic} to new {subject} scenarios", QuestionType.SHORT_ANSWER),
]

QUESTIONS_PER_SET = 4

QUESTION_POOLS: dict[QuestionType, list[dict]] = {
    QuestionType.MULTIPLE_CHOICE: [
        {
            "question": "Which basic idea is central to {topic}?",
            "options": [
                "The defining relationship of {topic}",
                "An unrelated definition",
                "A common misconception",
                "A detail from another unit",
            ],
            "correct_answer": 0,
            "explanation": "The defining relationship is the foundation every {topic} question builds on.",
        },
        {
            "question": "Which simple example best illustrates {topic}?",
            "options": [
                "A case from an unrelated unit",
                "A counterexample",
                "A textbook case of {topic}",
                "None of the above",
            ],
            "correct_answer": 2,
            "explanation": "Recognizing standard examples helps you spot {topic} on the exam.",
        },
        {
            "question": "Which statement about {topic} is NOT true?",
            "options": [
                "{topic} never appears on the AP exam",
                "{topic} connects to other {subject} units",
                "{topic} has standard vocabulary",
                "{topic} can be tested in free response",
            ],
            "correct_answer": 0,
            "explanation": "{topic} is part of the {subject} course framework.",
        },
    ],
    QuestionType.PROBLEM_SOLVING: [
        {
            "question": "Solve a basic {topic} problem and show each step of your work.",
            "correct_answer": "A complete solution with every step justified",
            "explanation": "AP graders award points for correct setup as well as the final answer.",
        },
        {
            "question": "Identify the error in a simple worked {topic} solution and correct it.",
            "correct_answer": "The incorrect step named and fixed",
            "explanation": "Finding errors in worked solutions builds the checking habit graders reward.",
        },
        {
            "question": "Set up, but do not solve, a multi-step {topic} problem.",
            "correct_answer": "A correct setup with all given quantities used",
            "explanation": "A correct setup often earns most of the available points.",
        },
    ],
    QuestionType.SHORT_ANSWER: [
        {
            "question": "Explain how {topic} applies to a basic real-world situation.",
            "correct_answer": "A real scenario linked explicitly to {topic}",
            "explanation": "Application answers must connect the concept to the scenario, not just name it.",
        },
        {
            "type": QuestionType.ESSAY,
            "question": "Compare {topic} with a related {subject} concept.",
            "correct_answer": "One similarity and one difference, each explained",
            "explanation": "Comparison questions reward explicit similarities and differences.",
        },
        {
            "question": "Predict what changes in a simple {topic} scenario if one condition is reversed.",
            "correct_answer": "A prediction with reasoning",
            "explanation": "Predictions need a justification grounded in {topic}.",
        },
    ],
}
