"""Constants and configuration values."""

# Supported response languages
LANGUAGE_NAMES = {
    "en": "English",
    "hi": "Hindi",
    "mr": "Marathi",
    "te": "Telugu",
    "kn": "Kannada",
    "ml": "Malayalam"
}

DEFAULT_LANGUAGE = "en"

MIME_TYPES_BY_EXTENSION = {".pdf": "application/pdf", ".txt": "text/plain"}
SUPPORTED_MIME_TYPES = set(MIME_TYPES_BY_EXTENSION.values())

# Prompt templates
SYSTEM_PROMPT_TEMPLATE = (
    "You are a legal document analysis expert. Analyze contracts precisely, "
    "explain clearly for non-lawyers, and avoid hallucinations. {language_instruction}"
)

LANGUAGE_INSTRUCTION_TEMPLATE = (
    "IMPORTANT: Provide ALL explanations, summaries, and simplified text in {language_name}. "
    "Only keep original quoted text in its original language."
)

USER_PROMPT_TEMPLATE = """Analyze the following legal document and return structured results via the analyze_document tool.

Filename: {file_name}

Focus on: payment terms, liability/risk, termination, deadlines, rights/responsibilities, and red flags. Keep quotes to first {quote_length} chars for each clause.

Document Content:
{content}"""

ANALYZE_TOOL_NAME = "analyze_document"

# Tool definition handed to the model for structured output
ANALYZE_TOOL = {
    "type": "function",
    "function": {
        "name": ANALYZE_TOOL_NAME,
        "description": "Return structured analysis of a legal document",
        "parameters": {
            "type": "object",
            "properties": {
                "summary": {"type": "string", "description": "2-3 sentence summary"},
                "documentType": {"type": "string", "description": "Type of document"},
                "keyPoints": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "text": {"type": "string"},
                            "type": {"type": "string", "enum": ["important", "critical", "favorable"]},
                            "explanation": {"type": "string"},
                        },
                        "required": ["text", "type", "explanation"],
                        "additionalProperties": False,
                    },
                    "minItems": 3,
                    "maxItems": 6,
                },
                "clauses": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "title": {"type": "string"},
                            "original": {"type": "string"},
                            "simplified": {"type": "string"},
                            "risk": {"type": "string", "enum": ["low", "medium", "high"]},
                        },
                        "required": ["title", "original", "simplified", "risk"],
                        "additionalProperties": False,
                    },
                    "minItems": 4,
                    "maxItems": 8,
                },
            },
            "required": ["summary", "documentType", "keyPoints", "clauses"],
            "additionalProperties": False,
        },
    },
}

# Service responses
INSUFFICIENT_CONTENT_ERROR = "No or insufficient document content provided."
INSUFFICIENT_CONTENT_SUMMARY = "Provide a longer document to analyze."
UNSUPPORTED_LANGUAGE_ERROR = "Unsupported language. Choose one of: {codes}."
TECHNICAL_FAILURE_SUMMARY = "Analysis failed due to technical issues. Please try again."
UNSUPPORTED_FILE_ERROR = "Unsupported file type. Please upload a PDF or text file."
FILE_TOO_LARGE_ERROR = "File is too large. Please upload a file up to {limit_mb}MB."

FALLBACK_SUMMARY = "Document analysis completed. Some fields may be simplified due to parsing fallback."
FALLBACK_DOCUMENT_TYPE = "legal document"
FALLBACK_KEY_POINT = {
    "text": "Contains legal obligations and terms",
    "type": "important",
    "explanation": "The document sets binding responsibilities."
}
FALLBACK_CLAUSE_TITLE = "General Provisions"
FALLBACK_CLAUSE_SIMPLIFIED = "Overview of primary terms and conditions."

# Highlighting, in priority order: a term listed under more than one
# category is tagged with the first one.
HIGHLIGHT_TERMS = {
    "critical": ["liable", "damages", "penalty", "breach", "default", "terminate"],
    "important": ["payment", "pay", "notice", "obligation", "rights", "warranty"],
    "favorable": ["benefit", "entitled", "may", "option"]
}

KEY_POINT_ORDER = ["critical", "important", "favorable"]

# Progress messages shown while an analysis is running
PROGRESS_MESSAGES = [
    "Initializing AI analysis...",
    "Reading document structure...",
    "Identifying legal clauses...",
    "Analyzing contract terms...",
    "Highlighting critical sections...",
    "Generating plain English translations...",
    "Finalizing analysis report..."
]

# Downloadable report
REPORT_TITLE = "LAWSIMPLE ANALYSIS REPORT"
REPORT_FILENAME_TEMPLATE = "lawsimple-analysis-{timestamp}.txt"

# Sample contracts for a quick demo, keyed by the name used on the command line
SAMPLE_DOCUMENTS = {
    "license": {
        "title": "Software License Agreement",
        "type": "License",
        "content": """SOFTWARE LICENSE AGREEMENT

This Software License Agreement ("Agreement") is entered into on [DATE] between TechCorp Inc. ("Licensor") and the end user ("Licensee").

WHEREAS, Licensor has developed proprietary software ("Software"); and
WHEREAS, Licensee desires to use said Software subject to the terms herein;

NOW THEREFORE, the parties agree as follows:

1. GRANT OF LICENSE
Licensor hereby grants Licensee a non-exclusive, non-transferable license to use the Software solely for Licensee's internal business purposes, subject to the limitations set forth herein.

2. RESTRICTIONS
Licensee shall not: (a) reverse engineer, decompile, or disassemble the Software; (b) distribute, rent, lease, or sublicense the Software; (c) remove any proprietary notices from the Software.

3. TERM AND TERMINATION
This Agreement shall commence on the date first written above and shall continue until terminated. Either party may terminate this Agreement upon thirty (30) days written notice. Upon termination, Licensee shall cease all use of the Software and destroy all copies.

4. WARRANTY DISCLAIMER
THE SOFTWARE IS PROVIDED "AS IS" WITHOUT WARRANTY OF ANY KIND. LICENSOR DISCLAIMS ALL WARRANTIES, EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE.

5. LIMITATION OF LIABILITY
IN NO EVENT SHALL LICENSOR BE LIABLE FOR ANY INDIRECT, SPECIAL, INCIDENTAL, OR CONSEQUENTIAL DAMAGES ARISING OUT OF OR RELATING TO THIS AGREEMENT OR THE USE OF THE SOFTWARE.

6. GOVERNING LAW
This Agreement shall be governed by and construed in accordance with the laws of the State of California.

IN WITNESS WHEREOF, the parties have executed this Agreement as of the date first written above."""
    },
    "employment": {
        "title": "Employment Contract",
        "type": "Employment",
        "content": """EMPLOYMENT AGREEMENT

This Employment Agreement ("Agreement") is made between InnovaCorp LLC ("Company") and [EMPLOYEE NAME] ("Employee").

1. EMPLOYMENT
Company hereby employs Employee, and Employee accepts employment with Company, subject to the terms and conditions set forth herein.

2. POSITION AND DUTIES
Employee shall serve as Senior Software Developer and shall perform such duties as are customarily performed by someone in such position, including but not limited to software development, code review, and technical documentation.

3. COMPENSATION
Company shall pay Employee an annual salary of $95,000, payable in accordance with Company's regular payroll schedule. Employee shall also be eligible for performance bonuses at Company's discretion.

4. BENEFITS
Employee shall be entitled to participate in all benefit plans generally available to Company employees, including health insurance, dental insurance, and 401(k) retirement plan.

5. CONFIDENTIALITY
Employee acknowledges that during employment, Employee may have access to confidential information. Employee agrees to maintain the confidentiality of such information and not to disclose it to any third party.

6. NON-COMPETE
During employment and for a period of twelve (12) months following termination, Employee agrees not to engage in any business that competes with Company within a 50-mile radius of Company's headquarters.

7. TERMINATION
Either party may terminate this Agreement at any time, with or without cause, upon two (2) weeks written notice.

This Agreement constitutes the entire agreement between the parties and supersedes all prior negotiations, representations, or agreements."""
    },
    "lease": {
        "title": "Rental Lease Agreement",
        "type": "Lease",
        "content": """RESIDENTIAL LEASE AGREEMENT

This Lease Agreement ("Lease") is entered into between PropertyMax LLC ("Landlord") and [TENANT NAME] ("Tenant").

1. PROPERTY
Landlord leases to Tenant the residential property located at 123 Oak Street, Apartment 4B, Springfield, State 12345 ("Premises").

2. TERM
The lease term shall commence on [START DATE] and expire on [END DATE], for a total term of twelve (12) months.

3. RENT
Monthly rent is $2,800, due on the first day of each month. Late fees of $50 per day will be assessed for rent received after the 5th day of the month.

4. SECURITY DEPOSIT
Tenant shall pay a security deposit of $2,800 prior to occupancy. This deposit shall secure Tenant's performance and may be used to remedy damages beyond normal wear and tear.

5. USE OF PREMISES
Premises shall be used solely as a private residence. No commercial activities, illegal activities, or activities that disturb other tenants are permitted.

6. PETS
No pets are allowed on the Premises without prior written consent from Landlord. Unauthorized pets may result in immediate termination and additional fees.

7. MAINTENANCE AND REPAIRS
Tenant is responsible for routine maintenance and minor repairs under $100. Landlord is responsible for major repairs, structural issues, and appliance maintenance.

8. DEFAULT AND REMEDIES
If Tenant fails to pay rent or breaches any other provision, Landlord may terminate this Lease and pursue all available legal remedies, including eviction and damages.

By signing below, both parties agree to be bound by the terms of this Lease Agreement."""
    }
}
