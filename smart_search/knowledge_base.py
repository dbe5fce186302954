"""
Maple Search - Knowledge Base
=============================
Static catalog of help articles the launcher can surface.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class KnowledgeItem:
    """A searchable catalog entry."""
    title: str
    category: str
    icon: str
    tags: Tuple[str, ...] = ()


def _item(title: str, category: str, icon: str, *tags: str) -> KnowledgeItem:
    return KnowledgeItem(title=title, category=category, icon=icon, tags=tuple(tags))


# Catalog order is the tie-break when two items score the same.
KNOWLEDGE_BASE: Tuple[KnowledgeItem, ...] = (
    _item("How to set up SSO", "Authentication & Security", "lock",
          "sso", "authentication", "security", "setup", "configuration"),
    _item("Deployment best practices", "DevOps", "server.rack",
          "deployment", "devops", "best practices", "ci/cd"),
    _item("Employee onboarding process", "HR", "person.badge.plus",
          "hr", "onboarding", "employees", "process"),

    # Analytics & Insights
    _item("Understanding Instagram Engagement Metrics", "Analytics", "chart.bar",
          "analytics", "engagement", "metrics", "insights", "reporting"),
    _item("Audience Growth Analysis Dashboard", "Analytics", "person.3",
          "audience", "growth", "analytics", "dashboard", "metrics"),
    _item("Content Performance Tracking", "Analytics", "chart.line.uptrend.xyaxis",
          "content", "performance", "tracking", "analytics", "posts"),

    # Campaign Management
    _item("Creating Multi-Channel Campaigns", "Campaigns", "bolt.horizontal",
          "campaigns", "marketing", "strategy", "multi-channel"),
    _item("Influencer Campaign Setup Guide", "Campaigns", "star",
          "influencer", "campaign", "setup", "collaboration"),
    _item("Story Analytics and Campaign Tracking", "Campaigns", "camera",
          "stories", "analytics", "tracking", "performance"),

    # Content Management
    _item("Content Calendar Best Practices", "Content", "calendar",
          "content", "calendar", "planning", "scheduling"),
    _item("Bulk Post Scheduling", "Content", "clock",
          "scheduling", "posts", "bulk", "automation"),
    _item("Asset Library Management", "Content", "photo.on.rectangle",
          "assets", "library", "media", "organization"),

    # Customer Support
    _item("DM Automation Setup", "Support", "message",
          "dm", "automation", "messages", "support"),
    _item("Comment Management Workflow", "Support", "bubble.left.and.bubble.right",
          "comments", "management", "moderation", "workflow"),
    _item("Support Team Response Templates", "Support", "text.bubble",
          "templates", "support", "responses", "customer service"),

    # Reporting
    _item("Creating Custom Report Templates", "Reporting", "exclamationmark.bubble",
          "reports", "templates", "custom", "analytics"),
    _item("Automated Weekly Performance Reports", "Reporting", "chart.bar.doc.horizontal",
          "automation", "reports", "weekly", "performance"),
    _item("Competitor Analysis Reports", "Reporting", "arrow.triangle.branch",
          "competitor", "analysis", "reports", "benchmarking"),

    # Integrations
    _item("Instagram API Integration Guide", "Integrations", "link",
          "api", "integration", "setup", "instagram"),
    _item("Webhook Configuration", "Integrations", "arrow.triangle.branch",
          "webhooks", "integration", "configuration", "automation"),
    _item("Third-Party Tools Connection", "Integrations", "square.grid.3x3.square",
          "integration", "tools", "connection", "third-party"),

    # Automation
    _item("Setting Up Auto-Response Rules", "Automation", "gearshape.2",
          "automation", "responses", "rules", "setup"),
    _item("Engagement Automation Workflows", "Automation", "arrow.triangle.turn.up.right.diamond",
          "automation", "engagement", "workflow", "responses"),
    _item("Comment Filtering and Auto-Moderation", "Automation", "text.bubble.fill",
          "comments", "moderation", "automation", "filtering"),
)
