"""Static practice-question corpus.

Laid out as type -> role -> level -> questions. ``DEFAULT_ROLE`` holds the
role-agnostic questions used when a role has nothing at a level. The pool is
frozen at import and handed to ``QuestionSelector`` explicitly.
"""
from types import MappingProxyType

from models.interview import InterviewType, Level

DEFAULT_ROLE = "default"


def _freeze(pool: dict) -> MappingProxyType:
    return MappingProxyType({
        interview_type: MappingProxyType({
            role: MappingProxyType({level: tuple(questions) for level, questions in levels.items()})
            for role, levels in roles.items()
        })
        for interview_type, roles in pool.items()
    })


_TECHNICAL = {
    "Software Engineer": {
        Level.ENTRY: [
            "Implement a function to check if a string is a palindrome.",
            "Given an array of integers, return the indices of two numbers that add up to a target.",
            "Explain the difference between stacks and queues with use cases.",
            "What is Big-O notation? Compare O(n), O(n log n), and O(n^2).",
            "Design a basic REST API for a todo list (endpoints, status codes).",
        ],
        Level.MID: [
            "Design a URL shortener like bit.ly. Discuss data model, API, and high throughput.",
            "Implement an LRU cache and explain time/space complexity.",
            "Merge two sorted arrays into one sorted array in O(n).",
            "Design a rate limiter (token bucket vs leaky bucket).",
            "Detect a cycle in a linked list and return the node where the cycle begins.",
        ],
        Level.SENIOR: [
            "Design a scalable logging system (ingestion, storage, indexing, query). Discuss trade-offs.",
            "How would you shard and replicate a database for a multi-region app?",
            "Implement a concurrent worker pool that processes tasks with backpressure handling.",
            "Design a real-time chat system (presence, message delivery, scaling, consistency).",
            "Optimize a slow microservice: outline methodology (profiling, tracing, caching, batching).",
        ],
    },
    "Data Scientist": {
        Level.ENTRY: [
            "Explain train/validation/test splits and why they matter.",
            "What is overfitting? How do you prevent it?",
            "Describe precision vs recall with scenarios.",
            "How would you handle missing values in a dataset?",
            "What is gradient descent?",
        ],
        Level.MID: [
            "Design an A/B test to evaluate a recommendation algorithm.",
            "Discuss feature selection (mutual information, PCA, embeddings).",
            "Compare XGBoost vs neural networks for tabular data.",
            "Explain bias-variance tradeoff with a concrete example.",
            "Handle class imbalance and robust evaluation.",
        ],
        Level.SENIOR: [
            "Design a feature store (governance, versioning, lineage).",
            "Productionize a model (monitoring, drift detection, retraining).",
            "Discuss online vs batch learning in streaming systems.",
            "Optimize inference latency (quantization, distillation, batching).",
            "Design a metric hierarchy for a multi-objective recommender.",
        ],
    },
    "Product Manager": {
        Level.ENTRY: [
            "Prioritize a simple backlog using MoSCoW.",
            "Define success metrics for a new onboarding flow.",
            "Write a basic PRD for a profile page.",
        ],
        Level.MID: [
            "Design an MVP for a marketplace. What metrics define success?",
            "Create a roadmap with goals, guardrails, and KPIs.",
            "Trade-off decision between time-to-market and quality.",
        ],
        Level.SENIOR: [
            "Define and align North Star metrics across multiple teams.",
            "Drive a multi-quarter strategy amid conflicting stakeholders.",
            "Post-launch analysis and iteration plan for a key product bet.",
        ],
    },
    "Designer": {
        Level.ENTRY: [
            "Heuristic evaluation for an onboarding flow.",
            "Design a simple form with accessibility in mind.",
        ],
        Level.MID: [
            "Create a design system for a small SaaS (atoms/molecules).",
            "Run a usability study and synthesize insights.",
        ],
        Level.SENIOR: [
            "Scale a design system across 5 product teams.",
            "Balance brand consistency with experimental UI in a new product.",
        ],
    },
}

_BEHAVIORAL = {
    "Software Engineer": {
        Level.ENTRY: [
            "Tell me about a time you learned a new technology quickly.",
            "Describe a time you received code review feedback and how you responded.",
        ],
        Level.MID: [
            "Tell me about a conflict you had over technical direction and how you resolved it.",
            "Describe a project where you influenced without formal authority.",
        ],
        Level.SENIOR: [
            "Describe a time you led engineering change across teams.",
            "Tell me about a strategic decision that failed. What did you learn?",
        ],
    },
    "Product Manager": {
        Level.ENTRY: [
            "Tell me about prioritizing conflicting tasks with limited information.",
            "Describe a time you handled ambiguous requirements.",
        ],
        Level.MID: [
            "Influenced stakeholders with competing goals—how?",
            "Describe pushing back on a timeline and the result.",
        ],
        Level.SENIOR: [
            "Led cross-org initiative amid resistance—what did you do?",
            "Describe a bet that didn't pay off and how you adapted.",
        ],
    },
    "Data Scientist": {
        Level.ENTRY: [
            "Tell me about communicating complex analysis to non-technical peers.",
            "Describe a time you handled messy data under time pressure.",
        ],
        Level.MID: [
            "Conflicting experimental results—how did you reconcile them?",
            "Describe collaborating with engineering to ship a model.",
        ],
        Level.SENIOR: [
            "Leading ML strategy across teams—how did you drive alignment?",
            "Handling model failure in production—response and learnings?",
        ],
    },
    DEFAULT_ROLE: {
        Level.ENTRY: ["Tell me about a time you learned a new skill quickly."],
        Level.MID: ["Tell me about a conflict you resolved at work."],
        Level.SENIOR: ["Describe a time you led a major change initiative."],
    },
}

# Mirrors behavioral but focuses on org impact
_LEADERSHIP = {
    "Software Engineer": {
        Level.ENTRY: ["Mentoring a junior engineer—how did you ensure growth?"],
        Level.MID: ["Leading a small team through delivery under pressure."],
        Level.SENIOR: ["Driving org-wide engineering excellence initiatives."],
    },
    "Product Manager": {
        Level.ENTRY: ["Coordinating cross-functional stakeholders on a small launch."],
        Level.MID: ["Leading roadmap alignment across multiple squads."],
        Level.SENIOR: ["Defining product strategy with executive stakeholders."],
    },
    DEFAULT_ROLE: {
        Level.ENTRY: ["Leading by example in small teams—share an instance."],
        Level.MID: ["Leading cross-functional delivery under constraints."],
        Level.SENIOR: ["Leading at scale: culture, strategy, and outcomes."],
    },
}

QUESTION_POOL = _freeze({
    InterviewType.TECHNICAL: _TECHNICAL,
    InterviewType.BEHAVIORAL: _BEHAVIORAL,
    InterviewType.LEADERSHIP: _LEADERSHIP,
})
