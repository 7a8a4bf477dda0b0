"""Sample Greek nouns and builders shared by the test modules."""
from engines.records import ExampleSentence, Template


TEACHER = dict(
    english="teacher",
    gender="masculine",
    nominative_sg="δάσκαλος",
    genitive_sg="δασκάλου",
    accusative_sg="δάσκαλο",
    nominative_pl="δάσκαλοι",
    genitive_pl="δασκάλων",
    accusative_pl="δασκάλους",
    nom_sg_article="ο",
    gen_sg_article="του",
    acc_sg_article="τον",
    nom_pl_article="οι",
    gen_pl_article="των",
    acc_pl_article="τους",
)

HOUSE = dict(
    english="house",
    gender="neuter",
    nominative_sg="σπίτι",
    genitive_sg="σπιτιού",
    accusative_sg="σπίτι",
    nominative_pl="σπίτια",
    genitive_pl="σπιτιών",
    accusative_pl="σπίτια",
    nom_sg_article="το",
    gen_sg_article="του",
    acc_sg_article="το",
    nom_pl_article="τα",
    gen_pl_article="των",
    acc_pl_article="τα",
)

BROTHER = dict(
    english="brother",
    gender="masculine",
    nominative_sg="αδελφός",
    genitive_sg="αδελφού",
    accusative_sg="αδελφό",
    nominative_pl="αδελφοί",
    genitive_pl="αδελφών",
    accusative_pl="αδελφούς",
    nom_sg_article="ο",
    gen_sg_article="του",
    acc_sg_article="τον",
    nom_pl_article="οι",
    gen_pl_article="των",
    acc_pl_article="τους",
)

SISTER = dict(
    english="sister",
    gender="feminine",
    nominative_sg="αδελφή",
    genitive_sg="αδελφής",
    accusative_sg="αδελφή",
    nominative_pl="αδελφές",
    genitive_pl="αδελφών",
    accusative_pl="αδελφές",
    nom_sg_article="η",
    gen_sg_article="της",
    acc_sg_article="την",
    nom_pl_article="οι",
    gen_pl_article="των",
    acc_pl_article="τις",
)


def make_sentence(id, noun_id, prompt, greek, answer, case="accusative", number="singular",
                  phase=1, context="direct_object", preposition=None) -> ExampleSentence:
    return ExampleSentence(
        id=id,
        noun_id=noun_id,
        english_prompt=prompt,
        greek_sentence=greek,
        correct_answer=answer,
        case_type=case,
        number=number,
        difficulty_phase=phase,
        context_type=context,
        preposition=preposition,
    )


def make_template(**overrides) -> Template:
    fields = dict(
        english_template="I see {noun}",
        greek_template="Βλέπω {article} {form}",
        article_field="acc_sg_article",
        noun_form_field="accusative_sg",
        case_type="accusative",
        number="singular",
        difficulty_phase=1,
        context_type="direct_object",
    )
    fields.update(overrides)
    return Template(**fields)
