import pytest

from debt_docket.segmenter import EntryGroup

SAMPLE_PAGE = [
    "THIRD JUDICIAL DISTRICT COURT - SALT LAKE",
    "Wednesday, January 3, 2024",
    "Courtroom S34",
    "JUDGE: KELLY SMITH",
    "01:00 PM   1   MOTION TO DISMISS",
    " ",
    "Debt Collection 230901234",
    "ACME FUNDING LLC    ATTY: SMITH, JOHN",
    "VS.",
    "DOE, JANE    ATTY: ",
    "ROE, RICHARD",
    "------------------------------------------------",
    "01:30 PM   2   ORDER TO SHOW CAUSE",
    "Order dated March 5, 2023",
    "Civil Stalking 230907777",
    "BROWN, TOM    ATTY: ",
    "VS.",
    "GREEN, AL    ATTY: ",
    "------------------------------------------------",
    "01:00 PM   3   PRETRIAL CONFERENCE",
    "Debt Collection 230905555",
    "MIDLAND CREDIT    ATTY: LEE, ANN",
    "ALSO A PLAINTIFF LLC",
    "VS.",
    "SMITH, BOB    ATTY: JONES, MARY",
    "Page 2 of 10",
]


@pytest.fixture
def sample_page():
    return list(SAMPLE_PAGE)


@pytest.fixture
def scenario_group():
    return EntryGroup(
        fragments=[
            "3 Motion for Summary Judgment",
            "4 Debt Collection Case",
            "John Smith ATTY: Jane Doe",
            "VS.",
            "Bob Jones ATTY: ",
        ],
        date="Jan 3, 2024",
        time="01:00 PM",
        court="S34",
    )
