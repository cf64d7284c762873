import argparse
import json
import logging
import sys
from pathlib import Path

from core.config_loader import AppConfig, load_config
from core.exceptions import ServiceException
from core.ranking import RankingResult, RankingService
from core.scorer import ScoringService
from core.text import parse_skill_list
from database.database import configure_engine, init_db
from database.uow import screening_uow
from extraction import ProfileExtractionService

logger = logging.getLogger(__name__)


def read_resume_text(file_path: str) -> str:
    """Read an already-decoded plain-text resume."""
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Resume file not found: {file_path}")
    return path.read_text(encoding='utf-8', errors='replace')


def ranking_to_dict(result: RankingResult) -> dict:
    return {
        'job_id': result.job_id,
        'rankings': [
            {
                'rank': entry.rank,
                'candidate_id': entry.candidate_id,
                'candidate_name': entry.display_name,
                'file_name': entry.file_name,
                'final_score': str(entry.final_score),
                'skill_score': str(entry.skill_score),
                'experience_score': str(entry.experience_score),
                'education_score': str(entry.education_score),
                'project_score': str(entry.project_score),
                'matched_skills': list(entry.matched_skills),
                'missing_skills': list(entry.missing_skills),
            }
            for entry in result.entries
        ],
        'failures': [{'candidate_id': f.candidate_id, 'error': f.error} for f in result.failures],
    }


def cmd_init_db(args, config: AppConfig) -> int:
    init_db()
    logger.info("Database tables created")
    return 0


def cmd_add_job(args, config: AppConfig) -> int:
    with screening_uow() as repo:
        job = repo.jobs.create_job_post(
            title=args.title,
            description=args.description,
            required_skills=parse_skill_list(args.required_skills),
            preferred_skills=parse_skill_list(args.preferred_skills),
            min_experience_years=args.min_years,
            required_education_level=args.education_level,
            required_education_field=args.education_field,
            job_type=args.job_type,
        )
        print(json.dumps({'job_id': job.id}))
    return 0


def cmd_upload(args, config: AppConfig) -> int:
    text = read_resume_text(args.file)
    service = ProfileExtractionService(config.extraction)

    with screening_uow() as repo:
        resume = repo.resumes.create_resume(
            raw_text=text,
            file_name=Path(args.file).name,
            candidate_name=args.name,
        )
        if not args.no_parse:
            service.parse_candidate(repo, resume.id)
        print(json.dumps({'candidate_id': resume.id}))
    return 0


def cmd_extract(args, config: AppConfig) -> int:
    service = ProfileExtractionService(config.extraction)
    fields = service.extract_structured_fields(read_resume_text(args.file))
    print(json.dumps({
        'skills': fields.skills_csv,
        'experience_years': fields.experience_years,
        'education_level': fields.education_level,
        'education_field': fields.education_field,
        'projects_summary': fields.projects_summary,
    }, indent=2))
    return 0


def cmd_parse(args, config: AppConfig) -> int:
    service = ProfileExtractionService(config.extraction)
    with screening_uow() as repo:
        fields = service.parse_candidate(repo, args.candidate_id)
    print(json.dumps({'candidate_id': args.candidate_id, 'skills': fields.skills_csv,
                      'experience_years': fields.experience_years}))
    return 0


def cmd_rank(args, config: AppConfig) -> int:
    service = RankingService(ScoringService(config.scoring), config.ranking)
    with screening_uow() as repo:
        result = service.rank_job(repo, args.job_id, recalculate=args.recalculate)
    print(json.dumps(ranking_to_dict(result), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Resume Screener")
    parser.add_argument('--config', default='config.yaml', help='Path to config.yaml')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    p = subparsers.add_parser('init-db', help='Create database tables')
    p.set_defaults(handler=cmd_init_db)

    p = subparsers.add_parser('add-job', help='Store a job requirement')
    p.add_argument('--title', required=True)
    p.add_argument('--description', default='')
    p.add_argument('--required-skills', default='', help='Comma-separated skills')
    p.add_argument('--preferred-skills', default='', help='Comma-separated skills')
    p.add_argument('--min-years', type=int, default=None)
    p.add_argument('--education-level', default=None)
    p.add_argument('--education-field', default=None)
    p.add_argument('--job-type', default=None)
    p.set_defaults(handler=cmd_add_job)

    p = subparsers.add_parser('upload', help='Store a plain-text resume and parse it')
    p.add_argument('file')
    p.add_argument('--name', default=None, help='Candidate display name')
    p.add_argument('--no-parse', action='store_true', help='Store the text without extracting')
    p.set_defaults(handler=cmd_upload)

    p = subparsers.add_parser('extract', help='Extract structured fields from a plain-text resume')
    p.add_argument('file')
    p.set_defaults(handler=cmd_extract)

    p = subparsers.add_parser('parse', help='Re-extract a stored resume')
    p.add_argument('--candidate-id', type=int, required=True)
    p.set_defaults(handler=cmd_parse)

    p = subparsers.add_parser('rank', help='Rank all stored candidates for a job')
    p.add_argument('--job-id', type=int, required=True)
    p.add_argument('--recalculate', action='store_true', help='Discard stored scores first')
    p.set_defaults(handler=cmd_rank)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = load_config(args.config)
    configure_engine(config.database.url)

    try:
        return args.handler(args, config)
    except (ServiceException, FileNotFoundError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
