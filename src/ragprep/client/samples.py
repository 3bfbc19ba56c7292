"""Sample configuration and documents for a first run.

The sample documents double as a metadata table: a document whose filename
matches a sample inherits the sample's source and category labels.
"""

import logging
from pathlib import Path

from ragprep.config import write_sample_config

logger = logging.getLogger(__name__)


SAMPLE_DOCUMENTS: list[dict[str, str]] = [
    {
        "filename": "password-reset.txt",
        "source": "Password Reset FAQ",
        "category": "account-management",
        "content": """How to Reset Your Password

If you've forgotten your password, you can reset it by following these steps:

1. Go to the login page
2. Click on "Forgot Password" link
3. Enter your email address
4. Check your email for reset instructions
5. Click the reset link in the email
6. Create a new strong password
7. Log in with your new password

Password Requirements:
- At least 8 characters long
- Include uppercase and lowercase letters
- Include at least one number
- Include at least one special character (!@#$%^&*)

If you continue to have trouble, contact our support team at support@company.com""",
    },
    {
        "filename": "subscription-cancellation.txt",
        "source": "Billing FAQ",
        "category": "billing",
        "content": """How to Cancel Your Subscription

You can cancel your subscription at any time by following these steps:

1. Log into your account
2. Go to Account Settings
3. Click on "Subscription" tab
4. Click "Cancel Subscription"
5. Confirm your cancellation
6. You'll receive a confirmation email

Important Notes:
- Your subscription will remain active until the end of your current billing period
- You can reactivate your subscription at any time before it expires
- Refunds are available within 30 days of purchase
- Contact billing@company.com for refund requests

After cancellation, you'll still have access to:
- Downloaded content
- Account history
- Ability to reactivate""",
    },
    {
        "filename": "performance-troubleshooting.txt",
        "source": "Technical Support FAQ",
        "category": "technical",
        "content": """Application Performance Troubleshooting

If your application is running slowly, try these troubleshooting steps:

Common Causes:
- Poor internet connection
- Browser cache issues
- Too many browser tabs open
- Outdated browser version
- System resources running low

Quick Fixes:
1. Refresh the page (Ctrl+F5 or Cmd+Shift+R)
2. Clear your browser cache and cookies
3. Close unnecessary browser tabs
4. Update your browser to the latest version
5. Restart your browser
6. Check your internet connection speed

Advanced Solutions:
- Disable browser extensions temporarily
- Try using an incognito/private browsing window
- Check for system updates
- Free up disk space
- Restart your computer

If problems persist after trying these steps, please contact technical support with:
- Your browser version
- Operating system
- Description of the performance issue
- Screenshot if applicable""",
    },
]


def find_sample(filename: str) -> dict[str, str] | None:
    """Return the sample document with this filename, if any."""
    for sample in SAMPLE_DOCUMENTS:
        if sample["filename"] == filename:
            return sample
    return None


def create_sample_config(config_path: str | Path) -> bool:
    """Write the sample config file if it does not exist yet.

    Returns:
        bool: True if a new file was written
    """
    created = write_sample_config(config_path)
    if created:
        logger.info(f"Created sample config at {config_path}")
    else:
        logger.info(f"Config already exists at {config_path}, leaving it untouched")
    return created


def create_sample_documents(docs_path: str | Path) -> list[Path]:
    """Write the sample documents into docs_path, skipping files that exist.

    Args:
        docs_path: Documents directory (created if missing)

    Returns:
        list[Path]: Paths of the files that were written
    """
    docs_dir = Path(docs_path)
    docs_dir.mkdir(parents=True, exist_ok=True)

    created = []
    for sample in SAMPLE_DOCUMENTS:
        file_path = docs_dir / sample["filename"]
        if file_path.exists():
            continue
        file_path.write_text(sample["content"], encoding="utf-8")
        created.append(file_path)
        logger.info(f"Created sample document {file_path}")

    return created
