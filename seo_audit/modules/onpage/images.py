"""Image alt text and dimension checks."""

from seo_audit.document import Document
from seo_audit.reporting.report import ReportSection

MAX_IMAGE_WIDTH = 1920
MAX_IMAGE_HEIGHT = 1080


def analyze_images(document: Document) -> ReportSection:
    section = ReportSection("Image Alt Text & Optimization")
    images = document.images
    if not images:
        section.info("No images found on the page")
        return section

    section.info(f"Found {len(images)} images")

    missing_alt = [img for img in images if img.alt is None]
    if missing_alt:
        section.error(f"{len(missing_alt)} images missing alt text")
        for img in missing_alt:
            section.info(f"   Missing alt: {img.src}")
        section.recommend("Add descriptive alt text to every image")
    else:
        section.success("All images have an alt attribute")

    for img in images:
        if img.width > MAX_IMAGE_WIDTH or img.height > MAX_IMAGE_HEIGHT:
            section.warn(f"Large image found: {img.src} ({img.width}x{img.height})")
    return section
