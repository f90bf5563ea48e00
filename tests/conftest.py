import logging
import sys
from pathlib import Path

import pytest

# Make the project root importable so `app`, `config`, `routes` and `pin_parser` resolve under pytest.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
PROJECT_ROOT_STR = str(PROJECT_ROOT)
if PROJECT_ROOT_STR not in sys.path:
    sys.path.insert(0, PROJECT_ROOT_STR)


SAMPLE_PIN_VECTOR = (
    'PinId=7C8EB9A44C2B6F1A2E5B6A8F7D4A6C1E,PinName="ReturnValue",Direction="EGPD_Output",'
    'PinType.PinCategory="struct",PinType.PinSubCategory="",'
    'PinType.PinSubCategoryObject=ScriptStruct\'"/Script/CoreUObject.Vector"\','
    'PinType.PinSubCategoryMemberReference=(),PinType.PinValueType=(),PinType.ContainerType=None,'
    'PinType.bIsReference=False,PinType.bIsConst=False,PinType.bIsWeakPointer=False,'
    'PinType.bIsUObjectWrapper=False,DefaultValue="1.000000, 2.000000, 3.000000",'
    'AutogeneratedDefaultValue="0, 0, 0",'
    'LinkedTo=(K2Node_CallFunction_3 0A4B5C6D7E8F90A1B2C3D4E5F6A7B8C9,),'
    'PersistentGuid=00000000000000000000000000000000,bHidden=False,bNotConnectable=False,'
    'bDefaultValueIsReadOnly=False,bDefaultValueIsIgnored=False,bAdvancedView=False,bOrphanedPin=False,'
)

SAMPLE_BLUEPRINT = """
Begin Object Class=/Script/BlueprintGraph.K2Node_CallFunction Name="K2Node_CallFunction_0"
   FunctionReference=(MemberParent=Class'"/Script/Engine.KismetSystemLibrary"',MemberName="PrintString")
   NodePosX=256
   NodePosY=-64
   NodeGuid=A1B2C3D4E5F60718293A4B5C6D7E8F90
   CustomProperties Pin (PinId=EXEC_IN,PinName="execute",PinType.PinCategory="exec",LinkedTo=(K2Node_Event_0 THEN_OUT,),)
   CustomProperties Pin (PinId=STR_IN,PinName="InString",PinType.PinCategory="string",DefaultValue="Hello, World",)
   CustomProperties Pin (PinId=BOOL_IN,PinName="bPrintToScreen",PinType.PinCategory="bool",DefaultValue="true",)
End Object
Begin Object Class=/Script/BlueprintGraph.K2Node_Event Name="K2Node_Event_0"
   NodePosX=0
   NodePosY=0
   NodeComment="Entry point"
   CustomProperties Pin (PinId=THEN_OUT,PinName="then",Direction="EGPD_Output",PinType.PinCategory="exec",LinkedTo=(K2Node_CallFunction_0 EXEC_IN,K2Node_Missing_9 NOPE,),)
End Object
"""


@pytest.fixture
def sample_pin_vector():
    return SAMPLE_PIN_VECTOR


@pytest.fixture
def sample_blueprint():
    return SAMPLE_BLUEPRINT


@pytest.fixture(autouse=True)
def _reset_pin_parser_logger():
    # The Flask factory detaches the package logger from the root logger; undo that between tests.
    yield
    parser_logger = logging.getLogger("pin_parser")
    parser_logger.handlers.clear()
    parser_logger.propagate = True
    parser_logger.setLevel(logging.NOTSET)
