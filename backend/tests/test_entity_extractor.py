from services.entity_extractor import (
    KNOWN_SKILLS,
    extract_basic,
    extract_email,
    extract_links,
    extract_location,
    extract_phone,
    extract_portfolio,
    extract_skills,
)


def test_extract_skills_case_insensitive():
    skills = extract_skills("Built services with python, DOCKER and kubernetes.")
    assert skills == ["Python", "Docker", "Kubernetes"]


def test_extract_skills_vocabulary_order_no_duplicates():
    text = "React React react. Also Python and then React again."
    assert extract_skills(text) == ["Python", "React"]


def test_extract_skills_substring_false_positive():
    # No word boundaries: "Java" is found inside "JavaScript"
    skills = extract_skills("Frontend developer: JavaScript only")
    assert "JavaScript" in skills
    assert "Java" in skills


def test_extract_skills_empty():
    assert extract_skills("") == []
    assert extract_skills("Nothing relevant here.") == []


def test_known_skills_unique():
    assert len(KNOWN_SKILLS) == len(set(KNOWN_SKILLS))


def test_extract_email_first_match():
    text = "Contact: jane.doe@mail.example.org or backup@other.io"
    assert extract_email(text) == "jane.doe@mail.example.org"
    assert extract_email("no email here") is None


def test_extract_phone_formats():
    assert extract_phone("Call (555) 123-4567 today") == "(555) 123-4567"
    assert extract_phone("Phone: +1-555-123-4567") == "+1-555-123-4567"
    assert extract_phone("555.123.4567") == "555.123.4567"
    assert extract_phone("Born 1990") is None


def test_extract_links_adds_scheme():
    links = extract_links("linkedin.com/in/janedoe  github.com/janedoe")
    assert links.linkedin == "https://linkedin.com/in/janedoe"
    assert links.github == "https://github.com/janedoe"


def test_extract_links_keeps_existing_scheme():
    links = extract_links("See https://www.behance.net/jdoe and http://dribbble.com/jdoe")
    assert links.behance == "https://www.behance.net/jdoe"
    assert links.dribbble == "http://dribbble.com/jdoe"


def test_extract_links_twitter_and_x():
    assert extract_links("twitter.com/jdoe").twitter == "https://twitter.com/jdoe"
    assert extract_links("x.com/jdoe").twitter == "https://x.com/jdoe"


def test_extract_links_absent_keys_omitted():
    links = extract_links("github.com/janedoe")
    dumped = links.present()
    assert dumped == {"github": "https://github.com/janedoe"}
    assert "linkedin" not in links.to_json_dict()


def test_extract_portfolio_skips_known_platforms():
    text = "github.com/jane  linkedin.com/in/jane  jane.dev"
    assert extract_portfolio(text) == "https://jane.dev"


def test_extract_portfolio_none():
    assert extract_portfolio("github.com/jane only") is None


def test_extract_portfolio_can_pick_up_email_domain():
    # Known imprecision: an email domain looks like a personal site
    assert extract_portfolio("jane@company.com") == "https://company.com"


def test_extract_location_labelled():
    assert extract_location("Jane Doe\nLocation: Austin, Texas\n") == "Austin, Texas"
    assert extract_location("Based in Berlin, Germany") == "Berlin, Germany"


def test_extract_location_city_state():
    text = "Jane Roe\nSeattle, WA | jane@mail.com"
    assert extract_location(text) == "Seattle, WA"


def test_extract_location_major_city():
    assert extract_location("Worked at the london office for 3 years") == "london"


def test_extract_location_none():
    assert extract_location("") is None
    assert extract_location("software engineer with 5 years experience") is None


def test_extract_basic_combines_extractors():
    text = (
        "John Doe\n"
        "Senior Software Engineer\n"
        "john@example.com | (555) 123-4567\n"
        "linkedin.com/in/johndoe\n"
        "Skills: JavaScript, React, Node.js"
    )
    basic = extract_basic(text)
    assert {"JavaScript", "React", "Node.js"} <= set(basic.skills)
    assert basic.email == "john@example.com"
    assert basic.phone == "(555) 123-4567"
    assert basic.links.linkedin == "https://linkedin.com/in/johndoe"


def test_extract_basic_is_deterministic():
    text = "Python dev in Toronto. me@site.io github.com/me"
    assert extract_basic(text) == extract_basic(text)
