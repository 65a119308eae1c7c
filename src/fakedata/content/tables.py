"""Themed lookup tables for content synthesis.

All canned content lives in :data:`THEME_TABLES`, a table-of-tables keyed by
accessor name and then by :class:`~fakedata.content.themes.Theme`.  A theme may
omit an accessor (``BUZZWORDS`` only defines a DEFAULT row, for instance); the
lookup then falls back to the DEFAULT row, which every accessor must define and
keep non-empty.  :func:`validate_theme_tables` enforces that rule and runs when
this module is imported.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from ..utils.errors import ThemeTableError
from .themes import Theme

ThemeTable = Mapping[Theme, tuple[str, ...]]

F = Theme.FINANCIAL
E = Theme.ENTERTAINMENT
H = Theme.HEALTHCARE
T = Theme.TECHNOLOGY
L = Theme.LEGAL
D = Theme.EDUCATION
R = Theme.RETAIL
X = Theme.DEFAULT

# ---------------------------------------------------------------------------
# Accessor keys
# ---------------------------------------------------------------------------

REPORT_NAMES: Final = "report_names"
SPREADSHEET_NAMES: Final = "spreadsheet_names"
DOCUMENT_NAMES: Final = "document_names"
PRESENTATION_NAMES: Final = "presentation_names"
IMAGE_NAMES: Final = "image_names"
COMPANY_AFFIXES: Final = "company_affixes"
DEPARTMENTS: Final = "departments"
INDUSTRIES: Final = "industries"
BUZZWORDS: Final = "buzzwords"
SENTENCES: Final = "sentences"
PARAGRAPHS: Final = "paragraphs"
EXPENSE_CATEGORIES: Final = "expense_categories"
REVENUE_STREAMS: Final = "revenue_streams"
SLIDE_TITLES: Final = "slide_titles"

# ---------------------------------------------------------------------------
# Descriptive file names
# ---------------------------------------------------------------------------

_REPORT_NAMES: dict[Theme, tuple[str, ...]] = {
    F: ("Quarterly_Financial_Report", "Annual_Audit_Report", "Investment_Analysis",
        "Tax_Filing_Summary", "Portfolio_Review", "Risk_Assessment", "Compliance_Report",
        "Budget_Analysis", "Cash_Flow_Statement", "Shareholder_Report"),
    E: ("Production_Schedule", "Talent_Contract_Summary", "Box_Office_Report",
        "Audience_Analytics", "Content_Strategy", "Media_Rights_Overview",
        "Festival_Submission", "Marketing_Campaign_Review", "Streaming_Performance",
        "Ratings_Analysis"),
    H: ("Patient_Care_Report", "Clinical_Trial_Summary", "Compliance_Audit",
        "Medical_Research_Findings", "Treatment_Protocol", "Health_Outcomes_Report",
        "Regulatory_Filing", "Quality_Assurance_Report", "Safety_Analysis",
        "Population_Health_Study"),
    T: ("Technical_Architecture", "System_Design_Document", "Security_Audit",
        "Performance_Analysis", "API_Documentation", "Infrastructure_Review", "DevOps_Report",
        "Code_Quality_Assessment", "Cloud_Migration_Plan", "Data_Pipeline_Overview"),
    L: ("Case_Summary", "Contract_Review", "Legal_Opinion", "Compliance_Assessment",
        "Litigation_Report", "Due_Diligence_Findings", "Regulatory_Analysis", "Policy_Review",
        "Risk_Assessment", "Settlement_Summary"),
    D: ("Curriculum_Review", "Student_Performance_Report", "Accreditation_Document",
        "Research_Grant_Proposal", "Faculty_Assessment", "Learning_Outcomes_Analysis",
        "Enrollment_Statistics", "Academic_Program_Review", "Campus_Planning_Report",
        "Budget_Allocation_Summary"),
    R: ("Sales_Performance_Report", "Inventory_Analysis", "Customer_Insights",
        "Market_Trends_Report", "Store_Operations_Review", "Supply_Chain_Analysis",
        "Seasonal_Forecast", "Merchandising_Strategy", "E-commerce_Analytics",
        "Loss_Prevention_Report"),
    X: ("Quarterly_Financial_Report", "Annual_Business_Review", "Executive_Summary",
        "Market_Analysis", "Strategic_Plan", "Compliance_Report", "Risk_Assessment",
        "Performance_Review", "Project_Status_Report", "Audit_Findings"),
}

_SPREADSHEET_NAMES: dict[Theme, tuple[str, ...]] = {
    F: ("Budget_Projections", "Financial_Statements", "Investment_Portfolio", "Tax_Calculations",
        "Revenue_Forecast", "Expense_Tracking", "Cash_Flow_Model", "Loan_Amortization",
        "Asset_Valuation", "ROI_Analysis"),
    E: ("Production_Budget", "Royalty_Calculations", "Ticket_Sales_Data", "Content_Schedule",
        "Revenue_Share_Model", "Cast_Crew_Budget", "Marketing_Spend", "Distribution_Revenue",
        "Merchandise_Sales", "Event_Attendance"),
    H: ("Patient_Statistics", "Treatment_Costs", "Resource_Allocation", "Clinical_Data",
        "Insurance_Claims", "Staff_Scheduling", "Equipment_Inventory", "Medication_Tracking",
        "Outcome_Metrics", "Budget_Allocation"),
    T: ("Sprint_Velocity", "Bug_Tracking", "Server_Metrics", "Cost_Analysis", "User_Analytics",
        "Feature_Backlog", "Release_Schedule", "Resource_Planning", "License_Inventory",
        "Performance_Benchmarks"),
    L: ("Billable_Hours", "Case_Tracking", "Settlement_Calculations", "Client_Billing",
        "Document_Index", "Deadline_Tracker", "Fee_Schedule", "Matter_Budget", "Conflict_Check",
        "Discovery_Log"),
    D: ("Grade_Book", "Enrollment_Data", "Course_Schedule", "Budget_Allocation",
        "Research_Funding", "Student_Demographics", "Faculty_Load", "Tuition_Revenue",
        "Scholarship_Awards", "Resource_Utilization"),
    R: ("Sales_Data", "Inventory_Levels", "Pricing_Analysis", "Customer_Database", "Vendor_Costs",
        "Profit_Margins", "Store_Performance", "Seasonal_Trends", "Promotion_Results",
        "Supply_Chain_Costs"),
    X: ("Budget_Projections", "Financial_Statements", "Sales_Forecast", "Expense_Tracker",
        "Revenue_Analysis", "Cost_Breakdown", "Inventory_Report", "Payroll_Summary",
        "Cash_Flow_Statement", "KPI_Dashboard"),
}

_DOCUMENT_NAMES: dict[Theme, tuple[str, ...]] = {
    F: ("Investment_Memo", "Policy_Guidelines", "Account_Agreement", "Regulatory_Filing",
        "Audit_Procedures", "Risk_Management_Policy", "Compliance_Manual", "Client_Onboarding",
        "Due_Diligence_Report", "Financial_Procedures"),
    E: ("Script_Draft", "Production_Notes", "Talent_Agreement", "Distribution_Contract",
        "Creative_Brief", "Press_Release", "Show_Bible", "Location_Agreement", "Music_License",
        "Publicity_Materials"),
    H: ("Treatment_Protocol", "Patient_Consent", "Clinical_Guidelines", "Research_Protocol",
        "HIPAA_Compliance", "Care_Plan", "Medical_Records_Policy", "Incident_Report",
        "Quality_Standards", "Staff_Procedures"),
    T: ("Technical_Specification", "User_Guide", "API_Reference", "Security_Policy",
        "Development_Standards", "Operations_Manual", "Incident_Response_Plan",
        "Data_Governance_Policy", "Architecture_Decision_Record", "Runbook"),
    L: ("Contract_Draft", "Legal_Brief", "Motion_Filing", "Discovery_Request",
        "Settlement_Agreement", "Client_Engagement_Letter", "Legal_Memorandum", "Court_Filing",
        "Witness_Statement", "Deposition_Summary"),
    D: ("Syllabus", "Course_Materials", "Research_Paper", "Grant_Application",
        "Accreditation_Report", "Student_Handbook", "Faculty_Guidelines", "Thesis_Draft",
        "Curriculum_Guide", "Assessment_Rubric"),
    R: ("Operations_Manual", "Employee_Handbook", "Vendor_Agreement", "Return_Policy",
        "Customer_Service_Guide", "Merchandising_Guidelines", "Store_Procedures",
        "Training_Materials", "Brand_Guidelines", "Promotion_Terms"),
    X: ("Meeting_Minutes", "Project_Proposal", "Policy_Document", "Implementation_Guide",
        "Technical_Specification", "Business_Requirements", "Contract_Draft",
        "Terms_and_Conditions", "User_Manual", "Process_Documentation"),
}

_PRESENTATION_NAMES: dict[Theme, tuple[str, ...]] = {
    F: ("Investor_Presentation", "Quarterly_Earnings", "Fund_Overview", "Market_Outlook",
        "Portfolio_Review", "IPO_Roadshow", "Board_Update", "Risk_Committee_Briefing",
        "Strategy_Review", "Client_Pitch"),
    E: ("Pitch_Deck", "Production_Kickoff", "Marketing_Campaign", "Premiere_Presentation",
        "Network_Upfront", "Festival_Pitch", "Talent_Showcase", "Distribution_Proposal",
        "Brand_Partnership", "Content_Strategy"),
    H: ("Clinical_Presentation", "Research_Findings", "Treatment_Overview", "Patient_Education",
        "Staff_Training", "Regulatory_Update", "Quality_Review", "Safety_Briefing",
        "Department_Update", "Board_Presentation"),
    T: ("Product_Launch", "Technical_Overview", "Architecture_Review", "Sprint_Demo",
        "Roadmap_Presentation", "Security_Briefing", "Cloud_Strategy", "Innovation_Showcase",
        "Partner_Pitch", "Team_Onboarding"),
    L: ("Case_Presentation", "Client_Briefing", "Trial_Preparation", "Settlement_Proposal",
        "Compliance_Training", "Firm_Overview", "Practice_Area_Update", "CLE_Presentation",
        "Expert_Testimony", "Mediation_Overview"),
    D: ("Course_Introduction", "Research_Presentation", "Department_Overview",
        "Accreditation_Review", "Faculty_Meeting", "Student_Orientation", "Graduation_Ceremony",
        "Alumni_Update", "Fundraising_Pitch", "Board_Presentation"),
    R: ("Sales_Kickoff", "Product_Launch", "Store_Manager_Meeting", "Vendor_Presentation",
        "Marketing_Strategy", "Holiday_Planning", "Training_Session", "Franchise_Overview",
        "Customer_Insights", "Quarterly_Review"),
    X: ("Board_Presentation", "Investor_Pitch", "Product_Launch", "Training_Materials",
        "Company_Overview", "Strategy_Presentation", "Sales_Pitch", "Quarterly_Update",
        "Project_Kickoff", "Team_Introduction"),
}

_IMAGE_NAMES: dict[Theme, tuple[str, ...]] = {
    F: ("Portfolio_Allocation_Chart", "Market_Performance_Graph", "Revenue_Breakdown",
        "Investment_Returns", "Risk_Heat_Map", "Cash_Flow_Diagram", "Asset_Distribution",
        "Growth_Projection", "Expense_Pie_Chart", "Trading_Volume"),
    E: ("Ratings_Chart", "Box_Office_Graph", "Audience_Demographics", "Content_Calendar",
        "Social_Media_Metrics", "Streaming_Analytics", "Production_Timeline",
        "Revenue_Distribution", "Engagement_Metrics", "Market_Share"),
    H: ("Patient_Outcomes_Chart", "Treatment_Effectiveness", "Resource_Utilization",
        "Clinical_Trial_Results", "Population_Health_Map", "Quality_Metrics",
        "Safety_Dashboard", "Staffing_Chart", "Cost_Analysis", "Procedure_Statistics"),
    T: ("System_Architecture_Diagram", "Performance_Metrics", "User_Growth_Chart",
        "Infrastructure_Map", "Sprint_Burndown", "Code_Coverage", "API_Traffic",
        "Error_Rate_Graph", "Deployment_Pipeline", "Resource_Usage"),
    L: ("Case_Timeline", "Settlement_Breakdown", "Billing_Summary", "Matter_Statistics",
        "Practice_Area_Revenue", "Client_Portfolio", "Win_Rate_Chart", "Hours_Distribution",
        "Fee_Analysis", "Workflow_Diagram"),
    D: ("Enrollment_Trends", "Grade_Distribution", "Research_Output", "Funding_Allocation",
        "Student_Demographics", "Graduation_Rates", "Faculty_Composition", "Course_Evaluation",
        "Campus_Map", "Budget_Breakdown"),
    R: ("Sales_Trend_Chart", "Inventory_Levels", "Customer_Journey_Map", "Store_Performance",
        "Market_Share_Pie", "Seasonal_Comparison", "Promotion_ROI", "Supply_Chain_Flow",
        "Customer_Segments", "Revenue_by_Category"),
    X: ("Organization_Chart", "Process_Flowchart", "Sales_Chart", "Revenue_Graph",
        "Market_Share_Diagram", "Timeline_Graphic", "Infographic", "Department_Structure",
        "Workflow_Diagram", "Performance_Chart"),
}

# ---------------------------------------------------------------------------
# Organisation vocabulary
# ---------------------------------------------------------------------------

_COMPANY_AFFIXES: dict[Theme, tuple[str, ...]] = {
    F: ("Capital", "Wealth", "Asset", "Investment", "Financial", "Trust", "Securities",
        "Advisory", "Partners", "Holdings"),
    E: ("Creative", "Media", "Studios", "Productions", "Entertainment", "Digital", "Content",
        "Pictures", "Films", "Network"),
    H: ("Medical", "Health", "Care", "Clinical", "Wellness", "Bio", "Life", "Pharma",
        "Therapeutics", "Diagnostics"),
    T: ("Tech", "Digital", "Cloud", "Data", "Software", "Systems", "Solutions", "Labs",
        "Innovations", "Computing"),
    L: ("Law", "Legal", "Counsel", "Attorneys", "Associates", "Partners", "Advocates",
        "Barristers", "Solicitors", "Chambers"),
    D: ("Academy", "Institute", "University", "College", "School", "Learning", "Education",
        "Research", "Foundation", "Center"),
    R: ("Retail", "Store", "Shop", "Market", "Goods", "Commerce", "Trading", "Merchants",
        "Outlet", "Emporium"),
    X: ("Global", "Premier", "Elite", "United", "National", "International", "Strategic",
        "Dynamic", "Innovative", "Advanced"),
}

_DEPARTMENTS: dict[Theme, tuple[str, ...]] = {
    F: ("Trading", "Risk Management", "Compliance", "Portfolio Management", "Client Services",
        "Research", "Operations", "Treasury"),
    E: ("Production", "Creative Development", "Distribution", "Marketing", "Talent Relations",
        "Legal Affairs", "Business Affairs", "Post-Production"),
    H: ("Patient Care", "Clinical Research", "Quality Assurance", "Nursing", "Pharmacy",
        "Radiology", "Laboratory", "Administration"),
    T: ("Engineering", "Product", "DevOps", "Security", "Data Science", "QA", "Infrastructure",
        "Customer Success"),
    L: ("Litigation", "Corporate", "Real Estate", "Tax", "Employment", "IP", "Regulatory",
        "Pro Bono"),
    D: ("Academic Affairs", "Student Services", "Research", "Admissions", "Financial Aid",
        "IT Services", "Facilities", "Alumni Relations"),
    R: ("Store Operations", "Merchandising", "Supply Chain", "E-commerce", "Customer Service",
        "Marketing", "Loss Prevention", "HR"),
    X: ("Finance", "Marketing", "Sales", "Operations", "HR", "IT", "Legal", "R&D"),
}

_INDUSTRIES: dict[Theme, tuple[str, ...]] = {
    F: ("Financial Services",),
    E: ("Media & Entertainment",),
    H: ("Healthcare",),
    T: ("Technology",),
    L: ("Legal Services",),
    D: ("Education",),
    R: ("Retail",),
    X: ("Professional Services", "Manufacturing", "Logistics", "Consumer Goods",
        "Telecommunications", "Energy", "Hospitality", "Construction"),
}

_BUZZWORDS: dict[Theme, tuple[str, ...]] = {
    X: ("robust", "sustained", "accelerated", "double-digit", "steady", "measurable",
        "broad-based", "strategic", "organic", "resilient", "scalable", "significant"),
}

# ---------------------------------------------------------------------------
# Prose
# ---------------------------------------------------------------------------

_SENTENCES: dict[Theme, tuple[str, ...]] = {
    F: (
        "Our portfolio demonstrated strong resilience despite market volatility.",
        "Client assets under management increased by double digits this quarter.",
        "Risk-adjusted returns exceeded benchmark performance across all strategies.",
        "Regulatory compliance remains a top priority with zero audit findings.",
        "New investment products attracted significant institutional interest.",
        "Trading volumes reached record levels in the derivatives segment.",
        "Cost optimization initiatives delivered substantial operational savings.",
        "Digital transformation efforts improved client onboarding efficiency.",
        "Cross-selling opportunities drove growth in fee-based revenue.",
        "Market share gains were achieved in key geographic regions.",
    ),
    E: (
        "Audience engagement metrics exceeded projections across all platforms.",
        "Original content investments are generating strong subscriber growth.",
        "Strategic partnerships expanded our global distribution reach.",
        "Award recognition enhanced brand prestige and talent attraction.",
        "Live event attendance set new records in major markets.",
        "Streaming platform performance improved viewer retention rates.",
        "Content licensing deals secured valuable intellectual property revenue.",
        "Production efficiency gains reduced time-to-market for new releases.",
        "Social media campaigns achieved viral reach and engagement.",
        "Merchandise sales benefited from successful franchise expansion.",
    ),
    H: (
        "Patient satisfaction scores improved significantly this reporting period.",
        "Clinical outcomes data demonstrates continued excellence in care quality.",
        "New treatment protocols reduced average length of stay.",
        "Telehealth adoption expanded access to underserved populations.",
        "Research initiatives secured substantial grant funding for clinical trials.",
        "Staff retention improved through enhanced professional development programs.",
        "Quality metrics exceeded regulatory requirements across all departments.",
        "Technology investments streamlined clinical workflow efficiency.",
        "Community health programs reached more participants than projected.",
        "Patient safety initiatives resulted in measurable harm reduction.",
    ),
    T: (
        "Platform reliability achieved industry-leading uptime performance.",
        "User adoption metrics exceeded growth targets for the quarter.",
        "Security enhancements strengthened our defensive posture significantly.",
        "Cloud migration delivered substantial infrastructure cost savings.",
        "API integration capabilities expanded our partner ecosystem.",
        "Machine learning implementations improved product recommendations.",
        "Mobile application downloads surpassed significant milestones.",
        "Development velocity increased through improved automation tooling.",
        "Customer success initiatives reduced churn to historic lows.",
        "Technical debt reduction improved system maintainability.",
    ),
    L: (
        "Case outcomes achieved favorable results for our clients.",
        "Practice area expertise expanded through strategic lateral hires.",
        "Client satisfaction surveys reflected strong relationship management.",
        "Pro bono contributions exceeded our annual commitment targets.",
        "Technology investments improved document review efficiency.",
        "Business development efforts generated significant new matters.",
        "Professional development programs enhanced associate retention.",
        "Cross-practice collaboration delivered comprehensive client solutions.",
        "Thought leadership publications enhanced market visibility.",
        "Regulatory expertise positioned the firm for emerging opportunities.",
    ),
    D: (
        "Student achievement metrics demonstrated continued academic excellence.",
        "Research output increased substantially with notable publications.",
        "Enrollment growth reflected strong demand for our programs.",
        "Graduate employment outcomes exceeded national benchmarks.",
        "Alumni engagement initiatives strengthened donor relationships.",
        "Faculty recruitment attracted distinguished scholars to campus.",
        "Online learning expansion reached new student populations.",
        "Campus infrastructure investments enhanced the learning environment.",
        "Scholarship funding increased access for deserving students.",
        "Accreditation reviews confirmed institutional quality standards.",
    ),
    R: (
        "Same-store sales growth outperformed industry averages.",
        "E-commerce revenue expanded as digital capabilities improved.",
        "Customer loyalty program membership reached new highs.",
        "Inventory management optimization reduced carrying costs.",
        "Store expansion strategy delivered strong unit economics.",
        "Supply chain improvements shortened delivery lead times.",
        "Private label products gained market share in key categories.",
        "Customer service initiatives improved satisfaction ratings.",
        "Promotional campaigns drove traffic and conversion improvements.",
        "Sustainability initiatives resonated with environmentally conscious consumers.",
    ),
    X: (
        "Strategic initiatives delivered results aligned with organizational objectives.",
        "Operational efficiency improvements generated meaningful cost savings.",
        "Market position strengthened through focused competitive differentiation.",
        "Team performance exceeded expectations across key metrics.",
        "Customer relationships deepened through enhanced service delivery.",
        "Innovation investments positioned the organization for future growth.",
        "Risk management practices maintained strong governance standards.",
        "Talent development programs built critical organizational capabilities.",
        "Process improvements streamlined operations and reduced cycle times.",
        "Stakeholder communication enhanced transparency and trust.",
    ),
}

_PARAGRAPHS: dict[Theme, tuple[str, ...]] = {
    F: (
        "The investment portfolio demonstrated exceptional performance during this period, "
        "with risk-adjusted returns exceeding benchmark indices. Our diversified approach to "
        "asset allocation proved effective in navigating market volatility while capturing "
        "upside opportunities. Client retention remained strong as relationship managers "
        "delivered personalized service and strategic guidance.",
        "Market conditions presented both challenges and opportunities for our trading "
        "operations. The team successfully identified arbitrage opportunities while "
        "maintaining disciplined risk management protocols. Technology investments in "
        "algorithmic trading capabilities enhanced execution quality and reduced transaction "
        "costs for institutional clients.",
        "Regulatory compliance initiatives continued to strengthen our operational framework. "
        "Internal audit reviews confirmed adherence to all applicable requirements, and staff "
        "training programs ensured awareness of evolving regulatory expectations. These "
        "efforts position us well for the increasingly complex compliance landscape.",
    ),
    E: (
        "Content production activities accelerated during this period, with multiple projects "
        "advancing through development and into production phases. Creative teams "
        "collaborated effectively to develop compelling narratives that resonate with target "
        "audiences. Quality standards remained high while production efficiency improved "
        "through optimized workflows.",
        "Audience engagement across our platforms exceeded expectations, driven by strategic "
        "content releases and effective marketing campaigns. Social media presence expanded "
        "significantly, generating organic reach and community building. Analytics-driven "
        "programming decisions improved content performance and viewer satisfaction metrics.",
        "Distribution partnerships expanded our global footprint, opening new markets and "
        "revenue streams. Licensing negotiations secured favorable terms for our content "
        "library, while streaming platform performance demonstrated the enduring value of our "
        "intellectual property portfolio.",
    ),
    H: (
        "Clinical excellence remained our highest priority, with patient outcomes "
        "demonstrating the effectiveness of our care protocols. Quality improvement "
        "initiatives targeted specific areas for enhancement, resulting in measurable "
        "improvements across key performance indicators. Staff dedication to patient-centered "
        "care continued to drive positive experiences.",
        "Research activities advanced significantly, with several studies progressing through "
        "critical milestones. Grant applications secured funding for innovative "
        "investigations into treatment approaches. Collaboration with academic partners "
        "enriched our research capabilities and contributed to the broader medical knowledge "
        "base.",
        "Operational improvements enhanced our ability to serve patients efficiently while "
        "maintaining the highest standards of care. Technology implementations streamlined "
        "clinical workflows, allowing healthcare providers to focus more time on direct "
        "patient interaction. These investments support our commitment to accessible, "
        "high-quality healthcare.",
    ),
    T: (
        "Platform development progressed according to roadmap priorities, with key features "
        "delivered on schedule. Engineering teams implemented architectural improvements that "
        "enhanced system scalability and reliability. User feedback informed iterative "
        "enhancements that improved the overall product experience.",
        "Security initiatives strengthened our defensive capabilities through implementation "
        "of advanced threat detection and response mechanisms. Vulnerability assessments "
        "identified areas for improvement, and remediation efforts addressed findings "
        "promptly. These measures reflect our commitment to protecting customer data and "
        "maintaining system integrity.",
        "Cloud infrastructure optimization delivered significant performance improvements "
        "while reducing operational costs. Migration of legacy systems to modern "
        "architectures enhanced development velocity and deployment flexibility. These "
        "technical investments establish a foundation for continued innovation and growth.",
    ),
    L: (
        "Legal practice activities produced favorable outcomes for clients across diverse "
        "matters. Litigation teams achieved successful resolutions through strategic advocacy "
        "and thorough preparation. Transactional practice groups closed significant deals "
        "that advanced client business objectives.",
        "Professional development investments enhanced capabilities across the firm. Training "
        "programs addressed emerging legal topics and practice skills. Mentorship initiatives "
        "supported associate growth and contributed to a culture of continuous learning and "
        "excellence.",
        "Client service remained central to our practice philosophy. Relationship partners "
        "maintained regular communication to understand evolving client needs. Proactive "
        "legal counsel helped clients navigate complex regulatory environments and business "
        "challenges effectively.",
    ),
    D: (
        "Academic programs continued to attract talented students seeking quality education. "
        "Curriculum enhancements ensured relevance to contemporary career requirements while "
        "maintaining rigorous intellectual standards. Faculty members demonstrated commitment "
        "to both teaching excellence and scholarly contributions.",
        "Research productivity increased substantially, with faculty publications appearing "
        "in leading peer-reviewed journals. Grant funding supported innovative investigations "
        "across disciplines. Graduate students contributed meaningfully to research projects "
        "while developing professional competencies.",
        "Campus life enriched the educational experience through diverse programming and "
        "student activities. Support services addressed student needs holistically, "
        "contributing to retention and success. Alumni connections provided networking "
        "opportunities and career guidance for current students.",
    ),
    R: (
        "Retail operations delivered strong results through effective execution of "
        "merchandising strategies. Store teams provided excellent customer service that drove "
        "loyalty and repeat purchases. Inventory management improvements ensured product "
        "availability while optimizing working capital utilization.",
        "Digital commerce capabilities expanded to meet evolving customer expectations. "
        "Mobile shopping experiences improved through user interface enhancements and "
        "streamlined checkout processes. Omnichannel integration allowed customers to engage "
        "seamlessly across shopping channels.",
        "Supply chain performance supported business growth through reliable product sourcing "
        "and distribution. Vendor partnerships strengthened through collaborative planning "
        "and performance management. Logistics network optimization reduced delivery times "
        "while improving cost efficiency.",
    ),
    X: (
        "Organizational performance reflected effective execution of strategic priorities. "
        "Teams collaborated across functions to deliver integrated solutions that addressed "
        "stakeholder needs. Leadership provided clear direction while empowering individuals "
        "to contribute their best efforts.",
        "Continuous improvement initiatives enhanced operational effectiveness across the "
        "organization. Process analysis identified opportunities for streamlining and "
        "automation. Implementation of best practices raised performance standards and "
        "improved consistency of outcomes.",
        "Stakeholder relationships strengthened through transparent communication and "
        "responsive engagement. Feedback mechanisms informed decision-making and demonstrated "
        "commitment to understanding diverse perspectives. These interactions built trust and "
        "supported collaborative problem-solving.",
    ),
}

# ---------------------------------------------------------------------------
# Spreadsheet and presentation vocabulary
# ---------------------------------------------------------------------------

_EXPENSE_CATEGORIES: dict[Theme, tuple[str, ...]] = {
    F: ("Trading Costs", "Compliance", "Technology", "Personnel", "Office Space", "Marketing",
        "Research", "Legal"),
    E: ("Production Costs", "Talent Fees", "Marketing", "Distribution", "Post-Production",
        "Music Rights", "Insurance", "Travel"),
    H: ("Medical Supplies", "Personnel", "Equipment", "Facilities", "Insurance", "IT Systems",
        "Research", "Compliance"),
    T: ("Cloud Infrastructure", "Personnel", "Software Licenses", "Hardware", "Security",
        "Marketing", "R&D", "Office"),
    L: ("Personnel", "Research Services", "Office Space", "Technology", "Marketing",
        "Insurance", "Travel", "Training"),
    D: ("Faculty Salaries", "Facilities", "Technology", "Research", "Student Services",
        "Athletics", "Administration", "Marketing"),
    R: ("Inventory", "Personnel", "Rent", "Marketing", "Logistics", "Technology", "Insurance",
        "Utilities"),
    X: ("Salaries", "Marketing", "Operations", "R&D", "Legal", "IT Infrastructure", "Travel",
        "Office Supplies"),
}

_REVENUE_STREAMS: dict[Theme, tuple[str, ...]] = {
    F: ("Asset Management Fees", "Trading Revenue", "Advisory Fees", "Interest Income",
        "Underwriting", "Custody Services"),
    E: ("Box Office", "Streaming", "Licensing", "Merchandise", "Live Events", "Advertising"),
    H: ("Patient Services", "Insurance Payments", "Research Grants", "Pharmacy", "Laboratory",
        "Consulting"),
    T: ("Software Licenses", "SaaS Subscriptions", "Professional Services", "Support Contracts",
        "Hardware", "Training"),
    L: ("Hourly Fees", "Contingency Fees", "Retainers", "Consulting", "Document Review",
        "Expert Witness"),
    D: ("Tuition", "Research Grants", "Donations", "Auxiliary Services", "Online Programs",
        "Continuing Education"),
    R: ("In-Store Sales", "E-commerce", "Wholesale", "Private Label", "Services", "Licensing"),
    X: ("Product Sales", "Services", "Licensing", "Subscriptions", "Consulting",
        "Support Contracts"),
}

_SLIDE_TITLES: dict[Theme, tuple[str, ...]] = {
    F: ("Market Overview", "Portfolio Performance", "Risk Analysis", "Investment Strategy",
        "Regulatory Update", "Client Metrics", "Growth Opportunities", "Competitive Landscape",
        "Technology Initiatives", "Next Quarter Outlook"),
    E: ("Creative Vision", "Audience Insights", "Content Pipeline", "Distribution Strategy",
        "Marketing Campaign", "Talent Updates", "Production Timeline", "Revenue Projections",
        "Partnership Opportunities", "Industry Trends"),
    H: ("Patient Outcomes", "Clinical Excellence", "Quality Metrics", "Research Updates",
        "Regulatory Compliance", "Staff Development", "Technology Integration",
        "Community Impact", "Financial Performance", "Strategic Priorities"),
    T: ("Product Roadmap", "Technical Architecture", "User Metrics", "Security Posture",
        "Cloud Strategy", "Team Updates", "Innovation Pipeline", "Market Position",
        "Partner Ecosystem", "Growth Projections"),
    L: ("Case Portfolio", "Practice Highlights", "Client Success Stories", "Regulatory Updates",
        "Team Accomplishments", "Business Development", "Technology Investments",
        "Industry Insights", "Pro Bono Impact", "Strategic Direction"),
    D: ("Academic Excellence", "Student Success", "Research Impact", "Faculty Achievements",
        "Campus Development", "Enrollment Trends", "Financial Sustainability",
        "Community Engagement", "Technology Innovation", "Future Vision"),
    R: ("Sales Performance", "Customer Insights", "Inventory Optimization",
        "Digital Transformation", "Store Operations", "Marketing ROI", "Supply Chain Updates",
        "Competitive Analysis", "Growth Strategy", "Seasonal Planning"),
    X: ("Executive Overview", "Market Opportunity", "Our Solution", "Key Metrics",
        "Financial Highlights", "Team Structure", "Roadmap", "Competitive Analysis",
        "Growth Strategy", "Next Steps"),
}


def validate_theme_tables(tables: Mapping[str, ThemeTable]) -> None:
    """Ensure every accessor defines a non-empty DEFAULT row.

    Raises
    ------
    ThemeTableError
        If an accessor has no DEFAULT row or any of its rows is empty.
    """

    for accessor, table in tables.items():
        default = table.get(Theme.DEFAULT)
        if not default:
            raise ThemeTableError(f"Accessor '{accessor}' has no DEFAULT entries")
        for theme, entries in table.items():
            if not entries:
                raise ThemeTableError(f"Accessor '{accessor}' has an empty {theme.name} row")


def lookup(accessor: str, theme: Theme) -> tuple[str, ...]:
    """Return the entries for ``accessor`` under ``theme`` or its DEFAULT row."""

    table = THEME_TABLES[accessor]
    return table.get(theme) or table[Theme.DEFAULT]


THEME_TABLES: Mapping[str, ThemeTable] = MappingProxyType(
    {
        REPORT_NAMES: MappingProxyType(_REPORT_NAMES),
        SPREADSHEET_NAMES: MappingProxyType(_SPREADSHEET_NAMES),
        DOCUMENT_NAMES: MappingProxyType(_DOCUMENT_NAMES),
        PRESENTATION_NAMES: MappingProxyType(_PRESENTATION_NAMES),
        IMAGE_NAMES: MappingProxyType(_IMAGE_NAMES),
        COMPANY_AFFIXES: MappingProxyType(_COMPANY_AFFIXES),
        DEPARTMENTS: MappingProxyType(_DEPARTMENTS),
        INDUSTRIES: MappingProxyType(_INDUSTRIES),
        BUZZWORDS: MappingProxyType(_BUZZWORDS),
        SENTENCES: MappingProxyType(_SENTENCES),
        PARAGRAPHS: MappingProxyType(_PARAGRAPHS),
        EXPENSE_CATEGORIES: MappingProxyType(_EXPENSE_CATEGORIES),
        REVENUE_STREAMS: MappingProxyType(_REVENUE_STREAMS),
        SLIDE_TITLES: MappingProxyType(_SLIDE_TITLES),
    }
)

validate_theme_tables(THEME_TABLES)

__all__ = [
    "BUZZWORDS",
    "COMPANY_AFFIXES",
    "DEPARTMENTS",
    "DOCUMENT_NAMES",
    "EXPENSE_CATEGORIES",
    "IMAGE_NAMES",
    "INDUSTRIES",
    "PARAGRAPHS",
    "PRESENTATION_NAMES",
    "REPORT_NAMES",
    "REVENUE_STREAMS",
    "SENTENCES",
    "SLIDE_TITLES",
    "SPREADSHEET_NAMES",
    "THEME_TABLES",
    "ThemeTable",
    "lookup",
    "validate_theme_tables",
]
