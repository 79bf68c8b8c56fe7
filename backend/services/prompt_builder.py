"""All prompt templates for Gemini API calls."""

import json

from models.schemas.resume import ContactLinks, TimelineEntry

ANALYSIS_TEXT_LIMIT = 6000
SEARCH_EXCERPT_LIMIT = 1500

JSON_ONLY_SYSTEM = (
    "You are a careful assistant. Always respond with a single valid JSON object only. "
    "No markdown, no code fences, no extra text."
)


def build_resume_analysis_prompt(resume_text: str) -> str:
    """Structured resume analysis: summary, roles, seniority, skills, timeline."""
    return f"""Analyze this resume and provide a structured analysis. Return ONLY valid JSON with no markdown.

Resume:
{resume_text[:ANALYSIS_TEXT_LIMIT]}

Return this exact JSON structure:
{{
  "summary": "A 2-3 sentence professional summary of this candidate highlighting their key strengths and experience level",
  "suggestedRoles": ["Role 1", "Role 2", "Role 3", "Role 4", "Role 5"],
  "seniorityLevel": "junior|mid|senior|lead|executive",
  "location": "City, Country or City, State - extract from resume address or mentioned location",
  "categorizedSkills": {{
    "Programming Languages": ["skill1", "skill2"],
    "Frameworks & Libraries": ["skill1", "skill2"],
    "Databases": ["skill1", "skill2"],
    "Cloud & DevOps": ["skill1", "skill2"],
    "Tools & Platforms": ["skill1", "skill2"],
    "Soft Skills": ["skill1", "skill2"]
  }},
  "timeline": [
    {{
      "type": "work",
      "title": "Job Title",
      "organization": "Company Name",
      "duration": "Jan 2022 - Present",
      "highlights": ["Key achievement 1", "Key achievement 2"]
    }},
    {{
      "type": "education",
      "title": "Degree Name",
      "organization": "University Name",
      "duration": "2018 - 2022",
      "highlights": ["GPA or honors if mentioned"]
    }}
  ]
}}

Rules:
- suggestedRoles should be specific job titles they should apply for
- categorizedSkills should only include skills ACTUALLY mentioned in the resume
- timeline should be in reverse chronological order (most recent first)
- location should be the candidate's current location (city, country/state)
- Keep summary concise but insightful
- Return ONLY the JSON object, nothing else"""


def build_search_strategy_prompt(
    skills: list[str], experience: list[str], raw_text: str = ""
) -> str:
    excerpt = f"Resume excerpt: {raw_text[:SEARCH_EXCERPT_LIMIT]}" if raw_text else ""
    return f"""Analyze this resume information and suggest the best job search strategy.

Skills: {', '.join(skills)}
Experience keywords: {', '.join(experience)}
{excerpt}

Return a JSON object with:
1. "jobTitles": Array of 3-5 specific job titles this person should apply for (e.g., "Full Stack Developer", "React Developer")
2. "searchQueries": Array of 3 optimized search queries for job boards
3. "seniority": One of "junior", "mid", "senior", "lead" based on experience
4. "topSkills": The 5 most marketable skills from their resume

Return ONLY valid JSON, no markdown or explanation."""


def _experience_text(timeline: list[TimelineEntry]) -> str:
    work = [e for e in timeline if e.kind == "work"]
    return "\n".join(
        f"{e.title} at {e.organization} ({e.duration}): {'; '.join(e.highlights)}"
        for e in work
    ) or "Not provided"


def _education_text(timeline: list[TimelineEntry]) -> str:
    return "\n".join(
        f"{e.title} from {e.organization} ({e.duration})"
        for e in timeline
        if e.kind == "education"
    ) or "Not provided"


COVER_LETTER_TONES = {
    "professional": "Use a formal, professional tone. Be polished and corporate-appropriate.",
    "enthusiastic": (
        "Use an enthusiastic and passionate tone while remaining professional. "
        "Show genuine excitement about the opportunity."
    ),
    "concise": (
        "Keep the letter brief and to-the-point. Focus on the most impactful "
        "qualifications. Aim for 3 short paragraphs maximum."
    ),
}


def build_cover_letter_prompt(
    *,
    name: str,
    skills: list[str],
    summary: str,
    timeline: list[TimelineEntry],
    job_title: str,
    company_name: str,
    job_description: str,
    position: str,
    experience_level: str,
    tone: str,
) -> str:
    tone_guide = COVER_LETTER_TONES.get(tone, COVER_LETTER_TONES["professional"])
    return f"""You are an expert career coach and professional writer. Generate a compelling, personalized cover letter.

APPLICANT INFORMATION:
- Name: {name}
- Skills: {', '.join(skills) or 'Not provided'}
- Experience: {_experience_text(timeline)}
- Education: {_education_text(timeline)}
- Profile Summary: {summary}

JOB DETAILS:
- Job Title: {job_title or 'Not specified'}
- Company: {company_name or 'Not specified'}
- Position Type: {position or 'Full-time'}
- Experience Level Required: {experience_level or 'Not specified'}
- Job Description: {job_description or 'Not provided'}

TONE: {tone_guide}

INSTRUCTIONS:
1. Write a professional cover letter tailored to this specific job and company
2. Highlight relevant skills and experiences from the applicant's resume that match the job requirements
3. Show knowledge of the company if possible based on the job description
4. Include specific examples from the applicant's experience
5. Keep it to 3-4 paragraphs (opening, body with qualifications, why this company, closing)
6. Do NOT include placeholder brackets like [Your Name] - use the actual applicant name
7. Do NOT include the address header or date - just start with the salutation
8. End with a professional closing

Return ONLY valid JSON in this exact format:
{{
    "coverLetter": "Dear Hiring Manager,\\n\\n[Full cover letter text with proper paragraph breaks using \\n\\n]\\n\\nSincerely,\\n{name}",
    "highlights": ["Key point 1 emphasized in the letter", "Key point 2", "Key point 3"],
    "matchedSkills": ["skill1", "skill2", "skill3"],
    "tips": "A brief tip about how to further customize this letter"
}}"""


COLD_EMAIL_TONES = {
    "professional": "Formal and polished. Corporate-appropriate.",
    "friendly": "Warm, conversational, and approachable while remaining professional.",
    "bold": "Confident and attention-grabbing. Stand out from the crowd.",
}


def _email_type_instructions(email_type: str, recipient_role: str) -> str:
    if email_type == "hiring_manager":
        return (
            f"This is a cold email to a HIRING MANAGER ({recipient_role or 'Hiring Manager'}). "
            "Focus on the business value you bring and how you can solve their team's problems."
        )
    if email_type == "referral":
        return (
            "This is an email asking for a REFERRAL from someone at the company. Be respectful "
            "of their time, mention what drew you to the company, and make it easy for them to refer you."
        )
    if email_type == "linkedin":
        return (
            "This is a SHORT LinkedIn connection request message (under 300 characters). "
            "Be concise, personalized, and give a clear reason for connecting."
        )
    if email_type == "recruiter":
        return (
            f"This is a cold email to a RECRUITER ({recipient_role or 'Recruiter'}). Focus on "
            "making their job easier: show you're a strong fit they'd want to present to "
            "their clients/hiring managers."
        )
    return "Cold outreach email to a recruiter."


_LINK_LABELS = {
    "linkedin": "LinkedIn",
    "github": "GitHub",
    "portfolio": "Portfolio",
    "twitter": "Twitter/X",
    "behance": "Behance",
    "dribbble": "Dribbble",
}


def build_cold_email_prompt(
    *,
    name: str,
    skills: list[str],
    summary: str,
    timeline: list[TimelineEntry],
    links: ContactLinks,
    job_title: str,
    company_name: str,
    job_description: str,
    recipient_role: str,
    email_type: str,
    tone: str,
) -> str:
    work = [e for e in timeline if e.kind == "work"][:3]
    recent = ", ".join(f"{e.title} at {e.organization}" for e in work) or "Not provided"
    links_text = "\n  ".join(
        f"{_LINK_LABELS[kind]}: {url}" for kind, url in links.present().items()
    ) or "None provided"
    tone_guide = COLD_EMAIL_TONES.get(tone, "Professional and polished.")

    return f"""You are an expert career coach who writes highly effective cold outreach emails that get responses.

APPLICANT INFO:
- Name: {name}
- Key Skills: {', '.join(skills) or 'Not provided'}
- Recent Experience: {recent}
- Profile: {summary}
- Online Profiles:
  {links_text}

TARGET:
- Company: {company_name or 'Not specified'}
- Job Title of Interest: {job_title or 'Not specified'}
- Job Description: {job_description or 'Not provided'}
- Recipient: {recipient_role or 'Recruiter'}

TYPE: {_email_type_instructions(email_type, recipient_role)}

TONE: {tone_guide}

INSTRUCTIONS:
1. Write a compelling, personalized outreach message
2. Keep it concise: max 150 words for emails, max 280 characters for LinkedIn
3. Include a clear subject line for emails
4. Reference specific skills/experience that match the role
5. End with a clear, low-friction call to action
6. Do NOT use placeholder brackets; use actual applicant data
7. Make it feel human, not templated
8. Weave relevant online profiles into the signature or body only where they fit

Return ONLY valid JSON in this exact format:
{{
    "subject": "Email subject line (empty string for LinkedIn messages)",
    "message": "The full email or LinkedIn message body",
    "followUp": "A polite 2-sentence follow-up message to send after 5-7 days",
    "tips": ["Tip 1 for improving response rate", "Tip 2", "Tip 3"],
    "type": "{email_type}"
}}"""


INTERVIEW_CATEGORIES = {
    "technical": "Focus only on technical questions about the listed skills.",
    "behavioral": "Focus only on behavioral/situational questions relevant to software development.",
    "system-design": "Focus only on system design and architecture questions.",
    "all": "Include a mix of technical, behavioral, and problem-solving questions.",
}

INTERVIEW_DIFFICULTIES = {
    "easy": (
        "EASY difficulty: Generate beginner-friendly questions that test basic understanding, "
        "definitions, and simple concepts. These should be answerable by junior developers."
    ),
    "medium": (
        "MEDIUM difficulty: Generate intermediate questions that require practical experience, "
        "understanding of common patterns, and ability to explain trade-offs."
    ),
    "hard": (
        "HARD difficulty: Generate advanced questions that require deep expertise, complex "
        "problem-solving, system design thinking, and knowledge of edge cases."
    ),
}


def build_interview_questions_prompt(
    skills: list[str],
    role: str,
    difficulty: str,
    category: str,
    exclude_questions: list[str],
) -> str:
    role_context = f"for a {role} position" if role else ""
    exclusion = ""
    if exclude_questions:
        previous = "\n".join(
            f"{i}. {q}" for i, q in enumerate(exclude_questions[-20:], start=1)
        )
        exclusion = (
            "\n\nIMPORTANT: Do NOT generate questions similar to these previously asked "
            f"questions:\n{previous}\n\nGenerate completely different questions that test "
            "different aspects of the skills."
        )

    return f"""You are an expert technical interviewer. Generate interview questions {role_context} for a candidate with these skills: {', '.join(skills[:10])}.

{INTERVIEW_DIFFICULTIES.get(difficulty, INTERVIEW_DIFFICULTIES['medium'])}
{INTERVIEW_CATEGORIES.get(category, INTERVIEW_CATEGORIES['all'])}{exclusion}

Generate exactly 10 questions. ALL questions must be {difficulty.upper()} difficulty level. For each question:
1. Question text
2. Category (technical, behavioral, or problem-solving)
3. Difficulty (must be "{difficulty}")
4. A concise but complete sample answer (1-2 paragraphs max)
5. Key points (3 bullet points)
6. Brief tip

Return ONLY valid JSON:
{{
    "questions": [
        {{
            "id": 1,
            "question": "Question text",
            "category": "technical",
            "difficulty": "{difficulty}",
            "skill": "Skill name",
            "detailedAnswer": "Complete sample answer in 1-2 paragraphs.",
            "expectedPoints": ["Point 1", "Point 2", "Point 3"],
            "tips": "Brief tip"
        }}
    ],
    "summary": {{
        "totalQuestions": 10,
        "skillsCovered": ["skill1", "skill2"],
        "estimatedDuration": "45 minutes"
    }}
}}"""


def build_answer_evaluation_prompt(
    question: str, answer: str, expected_points: list[str]
) -> str:
    return f"""You are an interview coach evaluating a candidate's answer.

Question: {question}

Expected key points: {', '.join(expected_points)}

Candidate's answer: {answer}

Evaluate the answer and provide:
1. Score (1-10)
2. Strengths (what they did well)
3. Areas to improve
4. Suggested better answer

Return ONLY valid JSON:
{json.dumps({
    "score": 7,
    "strengths": ["Strength 1", "Strength 2"],
    "improvements": ["Improvement 1", "Improvement 2"],
    "suggestedAnswer": "A more complete answer would be...",
}, indent=4)}"""
