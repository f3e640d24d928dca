"""Sample suitability reports used by demos and tests."""

SAMPLE_GOOD = """Client: Jane Doe
Objective: Long-term growth to age 60.
Risk: Balanced; Capacity for loss: Medium.
Charges: OCF 0.25%, Platform 0.20%, Adviser ongoing 0.50%.
Rationale: Meets objectives and risk, time horizon 15 years. Risks explained.
Ongoing service: Annual review and periodic statements."""

SAMPLE_BAD = """Client: J.D.
Objective: Make money.
Risk: High??
Recommendation: This fund is the best and guarantees performance.
Charges: n/a.
Rationale: Great returns seen online. No capacity for loss, no costs, no risks.
Execution-only. No knowledge/experience assessed."""

SAMPLES = {
    "good": SAMPLE_GOOD,
    "bad": SAMPLE_BAD,
}
