"""
Static idea catalog.

Declaration order matters: when two ideas score the same, the one
listed first wins.
"""

from types import MappingProxyType
from typing import Iterable, List, Tuple

from .errors import UnknownIdeaError
from .models import IdeaTemplate

IDEA_CATALOG: Tuple[IdeaTemplate, ...] = (
    IdeaTemplate(
        id="newsletter-niche",
        title="Niche Newsletter Business",
        tagline="Turn expertise into recurring revenue through focused content",
        category="Content",
        problem_statement="Professionals in specific industries lack curated, actionable insights delivered consistently.",
        target_customer="Mid-career professionals in a specific niche (finance, HR, marketing ops, etc.)",
        solution="A premium newsletter that delivers 1-2 high-value insights per week, monetized through subscriptions or sponsorships.",
        required_skills=("Writing", "Industry expertise", "Basic marketing"),
        capital_needed="$0-$100",
        time_to_first_revenue="2-4 weeks",
        risk_level="low",
        execution_complexity="simple",
        revenue_model="Paid subscriptions ($5-15/month) or sponsorships ($200-2000/issue)",
        potential_monthly_revenue="$1,000 - $10,000",
        mvp_scope=(
            "Pick a niche you know well",
            "Set up Substack or Beehiiv (free)",
            "Write 3 sample issues",
            "Share with 50 people in your network",
        ),
        go_to_market_wedge="Start by offering free content to build initial audience, convert 5-10% to paid after 8 issues.",
        seven_day_plan=(
            "Day 1: Define niche and unique angle",
            "Day 2: Set up newsletter platform",
            "Day 3-4: Write first 2 issues",
            "Day 5: Create simple landing page",
            "Day 6: Share with network, post in relevant communities",
            "Day 7: Send first issue, gather feedback",
        ),
        kill_criteria=(
            "Less than 100 subscribers after 4 weeks",
            "Open rate below 30%",
            "No one willing to pay after 2 months",
        ),
        why_now="Newsletter monetization tools have matured. Readers pay for focused, high-quality content.",
    ),
    IdeaTemplate(
        id="micro-saas-automation",
        title="Micro-SaaS Automation Tool",
        tagline="Solve one painful workflow problem for a specific role",
        category="SaaS",
        problem_statement="Teams waste hours on repetitive tasks that could be automated with simple tooling.",
        target_customer="Operations managers, recruiters, or marketers at SMBs",
        solution="A focused tool that automates one specific workflow (e.g., candidate outreach, report generation, data cleanup).",
        required_skills=("No-code/low-code", "Understanding of target workflow"),
        capital_needed="$0-$500",
        time_to_first_revenue="4-8 weeks",
        risk_level="medium",
        execution_complexity="moderate",
        revenue_model="SaaS subscription ($29-99/month per seat)",
        potential_monthly_revenue="$2,000 - $20,000",
        mvp_scope=(
            "Interview 5-10 people with the problem",
            "Build MVP with no-code tools (Bubble, Retool)",
            "Manual backend processes are fine initially",
            "Charge from day 1",
        ),
        go_to_market_wedge="Find where your target users complain online (Reddit, Slack communities). Offer to solve their problem.",
        seven_day_plan=(
            "Day 1-2: Talk to 5 potential users, validate problem",
            "Day 3-4: Design solution, create mockups",
            "Day 5-6: Build functional MVP",
            "Day 7: Get first beta user, gather feedback",
        ),
        kill_criteria=(
            "No one willing to pay after 10 conversations",
            "Problem not painful enough to switch tools",
            "Technical complexity exceeds your ability",
        ),
        why_now="No-code tools make it possible to build and iterate without engineering resources.",
    ),
    IdeaTemplate(
        id="productized-service",
        title="Productized Service",
        tagline="Package your expertise as a fixed-price, repeatable service",
        category="Service",
        problem_statement="Businesses need specialized help but hate unpredictable freelancer pricing and scope creep.",
        target_customer="Small business owners or startup founders needing specific expertise",
        solution='A fixed-scope, fixed-price service delivered consistently (e.g., "Website in a week for $2,000").',
        required_skills=("Domain expertise", "Basic project management"),
        capital_needed="$0-$200",
        time_to_first_revenue="1-2 weeks",
        risk_level="low",
        execution_complexity="simple",
        revenue_model="Fixed project fees ($500-$5,000) or monthly retainers",
        potential_monthly_revenue="$3,000 - $15,000",
        mvp_scope=(
            "Define exactly what you deliver",
            "Set fixed price and timeline",
            "Create simple sales page",
            "Reach out to 20 potential clients",
        ),
        go_to_market_wedge='Leverage existing network. Offer "founding client" discount for first 3 customers.',
        seven_day_plan=(
            "Day 1: Define service scope and pricing",
            "Day 2: Create Carrd or Notion landing page",
            "Day 3-4: Reach out to 20 people in network",
            "Day 5: Refine pitch based on objections",
            "Day 6: Follow up with interested leads",
            "Day 7: Close first client or schedule calls",
        ),
        kill_criteria=(
            "No interest after 30 outreach attempts",
            "Price too low to be sustainable",
            "Scope too variable to standardize",
        ),
        why_now="Businesses increasingly prefer predictable costs and outcomes over open-ended consulting.",
    ),
    IdeaTemplate(
        id="digital-templates",
        title="Digital Templates & Tools",
        tagline="Create once, sell forever with high-value digital products",
        category="Product",
        problem_statement="Professionals need ready-made frameworks but building from scratch wastes time.",
        target_customer="Professionals who value their time (consultants, marketers, project managers)",
        solution="Premium templates, spreadsheets, or Notion setups that solve specific problems.",
        required_skills=("Domain expertise", "Basic design sense"),
        capital_needed="$0-$100",
        time_to_first_revenue="2-4 weeks",
        risk_level="low",
        execution_complexity="simple",
        revenue_model="One-time purchases ($19-199) via Gumroad or Lemonsqueezy",
        potential_monthly_revenue="$500 - $5,000",
        mvp_scope=(
            "Identify problem you solve repeatedly",
            "Create polished template or tool",
            "Write compelling sales page",
            "Launch to existing audience or communities",
        ),
        go_to_market_wedge="Share free samples on Twitter/LinkedIn. Let quality drive word-of-mouth.",
        seven_day_plan=(
            "Day 1: Identify 3 template ideas, validate with audience",
            "Day 2-3: Build the most requested template",
            "Day 4: Create preview graphics and sales copy",
            "Day 5: Set up Gumroad store",
            "Day 6: Create launch content",
            "Day 7: Launch and promote",
        ),
        kill_criteria=(
            "Less than 10 sales in first month",
            "High refund rate (>10%)",
            "Market too crowded with free alternatives",
        ),
        why_now="Creator economy tools make selling digital products trivially easy.",
    ),
    IdeaTemplate(
        id="community-platform",
        title="Paid Community",
        tagline="Build a tribe around a shared interest or goal",
        category="Community",
        problem_statement="Professionals feel isolated and lack peer support for specific challenges.",
        target_customer="People with shared identity or goal (indie hackers, first-time managers, career changers)",
        solution="A curated community with exclusive content, events, and peer connections.",
        required_skills=("Community building", "Content creation", "Facilitation"),
        capital_needed="$0-$500",
        time_to_first_revenue="4-8 weeks",
        risk_level="medium",
        execution_complexity="moderate",
        revenue_model="Monthly membership ($20-100/month)",
        potential_monthly_revenue="$1,000 - $10,000",
        mvp_scope=(
            "Define the tribe identity clearly",
            "Start with free Discord/Slack",
            "Host weekly calls or AMAs",
            "Convert engaged members to paid tier",
        ),
        go_to_market_wedge="Build in public on Twitter/LinkedIn. Let your journey attract others on similar paths.",
        seven_day_plan=(
            "Day 1: Define community identity and value prop",
            "Day 2: Set up Circle, Discord, or Slack",
            "Day 3: Invite 20 people personally",
            "Day 4: Create welcome content",
            "Day 5: Host first event or discussion",
            "Day 6: Gather feedback, iterate",
            "Day 7: Plan paid tier structure",
        ),
        kill_criteria=(
            "Less than 30 engaged members after 6 weeks",
            "Conversations die without your constant input",
            "No one willing to pay for premium access",
        ),
        why_now="Remote work created demand for curated professional connections.",
    ),
)

_IDEAS_BY_ID = MappingProxyType({idea.id: idea for idea in IDEA_CATALOG})

IDEA_IDS: Tuple[str, ...] = tuple(_IDEAS_BY_ID)


def get_idea(idea_id: str) -> IdeaTemplate:
    """Look up a catalog idea by id. Raises UnknownIdeaError if absent."""
    try:
        return _IDEAS_BY_ID[idea_id]
    except KeyError:
        raise UnknownIdeaError(idea_id) from None


def available_ideas(excluded_ids: Iterable[str] = ()) -> List[IdeaTemplate]:
    """Catalog ideas not in ``excluded_ids``, in declaration order."""
    excluded = set(excluded_ids)
    return [idea for idea in IDEA_CATALOG if idea.id not in excluded]
